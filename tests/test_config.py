"""
NoteVault Backend — Configuration Tests
=======================================

What:  Tests for Settings parsing and the startup configuration check.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from notevault.config import DEFAULT_JWT_SECRET, Settings, parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (3600, 3600),
            ("900", 900),
            ("30s", 30),
            ("15m", 900),
            ("12h", 43200),
            ("7d", 604800),
            (" 2H ", 7200),
        ],
    )
    def test_accepted_formats(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "soon", "15x", "-5m", "1.5h"])
    def test_rejected_formats(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)

    def test_zero_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            parse_duration("0m")


class TestSettings:
    def test_token_life_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_TOKEN_LIFE", "1h")
        assert Settings().jwt_token_life == 3600

    def test_invalid_token_life_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(jwt_token_life="forever")

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="VERBOSE")

    def test_asymmetric_algorithm_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(jwt_algorithm="RS256")

    def test_bcrypt_rounds_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(bcrypt_rounds=3)

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]


class TestProductionCheck:
    def test_default_secret_fails(self):
        s = Settings(jwt_token_secret=DEFAULT_JWT_SECRET)
        with pytest.raises(ValueError, match="JWT_TOKEN_SECRET is not set"):
            s.validate_required_for_production()

    def test_short_secret_fails(self):
        s = Settings(jwt_token_secret="short-secret")
        with pytest.raises(ValueError, match="at least 32 characters"):
            s.validate_required_for_production()

    def test_strong_secret_passes(self):
        Settings(jwt_token_secret="x" * 48).validate_required_for_production()
