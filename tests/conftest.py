"""Pytest configuration and shared fixtures for fieldguard tests."""

from typing import Any, Dict, Generator

import pytest
import structlog

from fieldguard.config.settings import Settings
from fieldguard.schema import Validator


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings independent of the environment."""
    return Settings(
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        VALIDATION_ERROR_STATUS=422,
        VALIDATION_STRICT=True,
        VALIDATED_METHODS=["POST", "PUT", "PATCH"],
    )


@pytest.fixture
def team_validator() -> Validator:
    """Schema for one entry of a player's previous teams."""
    validator = Validator()
    validator.add_field({"name": "team", "type": "Identifier", "required": True})
    validator.add_field({"name": "season", "type": "Number", "options": {"min": 1900, "max": 2100}})
    return validator


@pytest.fixture
def player_validator(team_validator: Validator) -> Validator:
    """A realistic schema exercising every field type."""
    validator = Validator()
    validator.add_field({
        "name": "name",
        "type": "String",
        "options": {"canBeEmpty": False, "include": "lettersOnly", "maxWords": 3},
        "required": True,
    })
    validator.add_field({"name": "age", "type": "Number", "options": {"min": 0, "max": 99}, "required": True})
    validator.add_field({"name": "email", "type": "Email", "required": True})
    validator.add_field({"name": "website", "type": "URL"})
    validator.add_field({"name": "birthday", "type": "Date"})
    validator.add_field({"name": "active", "type": "Boolean"})
    validator.add_field({"name": "club", "type": "Identifier"})
    validator.add_field({"name": "address.city", "type": "String", "options": {"canBeEmpty": False}})
    validator.add_field({
        "name": "positions",
        "type": "Array",
        "options": {
            "maxRecords": 3,
            "arrayValuesType": "String",
            "arrayValuesOptions": {"enum": ["GK", "DF", "MF", "FW"]},
        },
    })
    validator.add_field({
        "name": "previousTeams",
        "type": "Array",
        "options": {"maxRecords": 10},
        "validator": team_validator,
    })
    return validator


@pytest.fixture
def sample_player() -> Dict[str, Any]:
    """A player record that passes the player schema."""
    return {
        "name": "Ivan Petrov",
        "age": 27,
        "email": "ivan.petrov@example.com",
        "website": "https://petrov.example.com/profile",
        "birthday": "1997-05-14",
        "active": True,
        "club": "507f1f77bcf86cd799439011",
        "address": {"city": "Sofia"},
        "positions": ["MF", "FW"],
        "previousTeams": [
            {"team": "507f191e810c19729de860ea", "season": 2019},
            {"team": "507f191e810c19729de860eb"},
        ],
    }
