"""
==============================================================================
Settings Tests
==============================================================================

Tests for configuration defaults and normalisation.

==============================================================================
"""

from stockroom.config import Settings


class TestSettings:
    """Tests for the Settings model."""

    def test_inventory_defaults(self):
        settings = Settings()
        assert settings.low_stock_threshold == 10
        assert settings.delivery_lead_days == 7

    def test_unknown_environment_falls_back(self):
        assert Settings(app_env=" Production ").app_env == "production"
        assert Settings(app_env="qa").app_env == "development"

    def test_cors_origins_list(self):
        assert Settings(cors_origins='["http://localhost:3000"]').cors_origins_list == ["http://localhost:3000"]
        assert Settings(cors_origins="not json").cors_origins_list == ["*"]

    def test_only_used_properties_exposed(self):
        assert not hasattr(Settings(), "is_development")
        assert not hasattr(Settings(), "is_production")
