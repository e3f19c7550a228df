"""Unit tests for infrastructure settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.settings import NavigationSettings, Settings, TenancySettings


class TestTenancySettings:
    """Tests for tenant resolution settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SUITE_TENANCY_HEADER_NAME", raising=False)
        monkeypatch.delenv("SUITE_TENANCY_QUERY_PARAM", raising=False)
        monkeypatch.delenv("SUITE_TENANCY_DEFAULT_TENANT_ID", raising=False)

        settings = TenancySettings()

        assert settings.header_name == "x-tenant-id"
        assert settings.query_param == "tenantId"
        assert settings.default_tenant_id is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUITE_TENANCY_HEADER_NAME", "X-Org-Id")
        monkeypatch.setenv("SUITE_TENANCY_QUERY_PARAM", "org")
        monkeypatch.setenv("SUITE_TENANCY_DEFAULT_TENANT_ID", "main")

        settings = TenancySettings()

        assert settings.header_name == "x-org-id"
        assert settings.query_param == "org"
        assert settings.default_tenant_id == "main"

    def test_blank_default_tenant_is_unset(self):
        assert TenancySettings(default_tenant_id="").default_tenant_id is None

    def test_header_name_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            TenancySettings(header_name="")

    def test_blank_header_name_is_rejected(self, monkeypatch):
        """Whitespace-only names must not pass as an empty header name."""
        monkeypatch.setenv("SUITE_TENANCY_HEADER_NAME", "   ")

        with pytest.raises(ValidationError):
            TenancySettings()

    def test_blank_query_param_is_rejected(self):
        with pytest.raises(ValidationError):
            TenancySettings(query_param="  ")

    def test_names_are_stripped(self):
        settings = TenancySettings(header_name=" X-Org ", query_param=" org ")
        assert settings.header_name == "x-org"
        assert settings.query_param == "org"


class TestNavigationSettings:
    """Tests for navigation settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SUITE_NAVIGATION_CONFIG_PATH", raising=False)
        monkeypatch.delenv("SUITE_NAVIGATION_STRICT_VALIDATION", raising=False)

        settings = NavigationSettings()

        assert settings.config_path is None
        assert settings.strict_validation is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUITE_NAVIGATION_CONFIG_PATH", "/etc/suite/nav.json")
        monkeypatch.setenv("SUITE_NAVIGATION_STRICT_VALIDATION", "true")

        settings = NavigationSettings()

        assert settings.config_path == Path("/etc/suite/nav.json")
        assert settings.strict_validation is True


class TestSettings:
    """Tests for the aggregate settings."""

    def test_app_defaults(self, monkeypatch):
        monkeypatch.delenv("APP_NAME", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)

        settings = Settings()

        assert settings.app_name == "Suite Shell API"
        assert settings.debug is False

    def test_exposes_sections(self):
        settings = Settings()
        assert isinstance(settings.tenancy, TenancySettings)
        assert isinstance(settings.navigation, NavigationSettings)
