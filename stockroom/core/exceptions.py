"""
Application Exception Handling

Single AppException class for all inventory errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    The message is the exact human-readable text shown to the user; the code
    lets callers branch without parsing it.

    Usage:
        raise AppException("Product not found: 7", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        Catalog:
            - PRODUCT_NOT_FOUND (404)
            - DUPLICATE_NAME (409)

        Procurement:
            - OUT_OF_STOCK (409)
            - INSUFFICIENT_STOCK (409)

        General:
            - VALIDATION_ERROR (422)
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "OUT_OF_STOCK")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_id_missing() -> AppException:
    """Create exception for a procurement without a product ID."""
    return AppException("Product not found: ID is missing.", "PRODUCT_NOT_FOUND", 404)


def product_not_found(product_id: str) -> AppException:
    """Create product not found exception."""
    return AppException(
        f"Product not found: {product_id}",
        "PRODUCT_NOT_FOUND",
        404,
        {"product_id": product_id}
    )


def out_of_stock(name: str) -> AppException:
    """Create out of stock exception."""
    return AppException(
        f"Product out of stock: {name}",
        "OUT_OF_STOCK",
        409,
        {"product_name": name, "available": 0}
    )


def insufficient_stock(name: str, requested: int, available: int) -> AppException:
    """Create insufficient stock exception."""
    return AppException(
        f"Insufficient stock for {name}. Requested: {requested}, Available: {available}",
        "INSUFFICIENT_STOCK",
        409,
        {"product_name": name, "requested": requested, "available": available}
    )


def duplicate_name(name: str) -> AppException:
    """Create duplicate product name exception."""
    return AppException(
        f"Item already exists: {name}",
        "DUPLICATE_NAME",
        409,
        {"product_name": name}
    )


def validation_error(message: str, field: Optional[str] = None) -> AppException:
    """Create validation error for malformed caller input."""
    details = {"field": field} if field else {}
    return AppException(message, "VALIDATION_ERROR", 422, details)


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
