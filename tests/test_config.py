"""
Tests for settings validation
"""
import pytest
from pydantic import ValidationError

from lijstje.common.config import Settings


def test_log_level_uppercased():
    assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_environment_lowercased():
    assert Settings(ENVIRONMENT="Production").environment == "production"


def test_invalid_environment():
    with pytest.raises(ValidationError):
        Settings(ENVIRONMENT="qa")


def test_database_url():
    settings = Settings(
        DB_USER="boodschap",
        DB_PASSWORD="geheim",
        DB_HOST="db",
        DB_PORT=5433,
        DB_NAME="lijst",
    )
    assert settings.database_url == "postgresql://boodschap:geheim@db:5433/lijst"


def test_expected_purchases_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(EXPECTED_PURCHASES_LIMIT=0)
