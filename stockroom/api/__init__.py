"""
API Package

REST routers for the inventory service.
"""
