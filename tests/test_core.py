"""
Tests for core helpers.

Tests:
- Settings parsing (CORS origins, database URL override)
- Engine options per database backend
- is_active query filter
- JSON log formatting
- Error envelope
"""

import json
import logging

import pytest

from app.core.config import Settings
from app.core.database import _engine_options
from app.core.deps import get_active_filter
from app.core.errors import ErrorKind, error_response
from app.core.logging_config import CustomJsonFormatter


class TestSettings:
    """Tests for Settings"""

    def test_cors_origins_from_comma_list(self):
        """Test comma separated origins"""
        s = Settings(BACKEND_CORS_ORIGINS="https://admin.example.com, https://app.example.com")
        assert s.BACKEND_CORS_ORIGINS == ["https://admin.example.com", "https://app.example.com"]

    def test_cors_origins_from_json(self):
        """Test JSON encoded origins"""
        s = Settings(BACKEND_CORS_ORIGINS='["https://admin.example.com"]')
        assert s.BACKEND_CORS_ORIGINS == ["https://admin.example.com"]

    def test_database_url_override(self):
        """Test SQLALCHEMY_DATABASE_URI wins over the POSTGRES_* parts"""
        assert Settings(SQLALCHEMY_DATABASE_URI="sqlite:///./dev.db").DATABASE_URL == "sqlite:///./dev.db"

    def test_database_url_from_parts(self):
        """Test URL assembled from POSTGRES_* settings"""
        s = Settings(
            SQLALCHEMY_DATABASE_URI=None,
            POSTGRES_USER="admin",
            POSTGRES_PASSWORD="secret",
            POSTGRES_SERVER="db",
            POSTGRES_PORT="5433",
            POSTGRES_DB="marketplace",
        )
        assert s.DATABASE_URL == "postgresql+psycopg2://admin:secret@db:5433/marketplace"


class TestEngineOptions:
    """Tests for _engine_options"""

    def test_postgres_pool(self):
        """Test PostgreSQL gets a sized pool"""
        options = _engine_options("postgresql://user:pw@localhost/marketplace_db")
        assert options["pool_pre_ping"] is True
        assert "pool_size" in options and "max_overflow" in options

    def test_sqlite(self):
        """Test SQLite gets no pool sizing"""
        assert _engine_options("sqlite:///./dev.db") == {"connect_args": {"check_same_thread": False}}


class TestActiveFilter:
    """Tests for get_active_filter"""

    @pytest.mark.parametrize("value,expected", [
        ("active", True),
        ("TRUE", True),
        (" inactive ", False),
        ("false", False),
        ("all", None),
        ("", None),
        (None, None),
    ])
    def test_values(self, value, expected):
        assert get_active_filter(value) is expected


class TestJsonLogs:
    """Tests for CustomJsonFormatter"""

    def make_record(self, level):
        return logging.LogRecord(
            name="app.crud.sequence",
            level=level,
            pathname=__file__,
            lineno=42,
            msg="Updated sequence of %d rows",
            args=(3,),
            exc_info=None,
        )

    def test_standard_fields(self):
        """Test service, level and logger are always present"""
        formatter = CustomJsonFormatter("%(message)s")
        payload = json.loads(formatter.format(self.make_record(logging.INFO)))

        assert payload["message"] == "Updated sequence of 3 rows"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.crud.sequence"
        assert payload["service"]
        assert "timestamp" in payload
        assert "line" not in payload

    def test_location_on_warnings(self):
        """Test warnings carry the source location"""
        formatter = CustomJsonFormatter("%(message)s")
        payload = json.loads(formatter.format(self.make_record(logging.ERROR)))

        assert payload["line"] == 42
        assert payload["pathname"] == __file__


class TestErrorResponse:
    """Tests for error_response"""

    def test_envelope(self):
        response = error_response(ErrorKind.PERSISTENCE_ERROR, "Failed to update sequence")

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "success": False,
            "error": "persistence_error",
            "message": "Failed to update sequence",
        }

    def test_status_override(self):
        response = error_response(ErrorKind.STORAGE_ERROR, "Failed to store file", status_code=503)

        assert response.status_code == 503
        assert json.loads(response.body)["error"] == "storage_error"
