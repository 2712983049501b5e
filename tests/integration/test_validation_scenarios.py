"""End-to-end validation scenarios across rules and schemas."""

import pytest

from fieldguard import Validator
from fieldguard.rules import RECORDS_ERROR_MARKER


class TestEndToEndScenarios:
    def test_number_above_max(self):
        validator = Validator()
        validator.add_field({"name": "age", "type": "Number", "options": {"min": 0, "max": 99}, "required": True})

        result = validator.validate({"age": 150})

        assert result.success is False
        assert result.errors == "'age' must be max 99!"

    def test_empty_array_below_min_records(self):
        validator = Validator()
        validator.add_field({
            "name": "tags",
            "type": "Array",
            "options": {"minRecords": 1, "arrayValuesType": "String"},
        })

        result = validator.validate({"tags": []})

        assert result.success is False
        assert result.errors == "'tags' must have min 1 records!"

    def test_nested_schema_and_array_rule_both_report(self):
        teams = Validator()
        teams.add_field({"name": "team", "type": "Identifier", "required": True})
        validator = Validator()
        validator.add_field({
            "name": "previousTeams",
            "type": "Array",
            "options": {"minRecords": 2},
            "validator": teams,
        })

        result = validator.validate({"previousTeams": [{"team": "not-an-id"}]})

        assert result.success is False
        assert result.errors == (
            "'previousTeams' must have min 2 records! | "
            "'previousTeams' 'team' must be valid identifier!"
        )

    def test_element_type_and_nested_errors_both_report(self):
        teams = Validator()
        teams.add_field({"name": "team", "type": "Identifier", "required": True})
        validator = Validator()
        validator.add_field({
            "name": "previousTeams",
            "type": "Array",
            "options": {"arrayValuesType": "String"},
            "validator": teams,
        })

        result = validator.validate({"previousTeams": [{"team": "not-an-id"}]})

        element_error, nested_error = result.errors.split(" | ")
        assert element_error.startswith(f"'previousTeams' {RECORDS_ERROR_MARKER}")
        assert "is not a 'string' type!" in element_error
        assert nested_error == "'previousTeams' 'team' must be valid identifier!"

    def test_deeply_nested_schemas(self):
        players = Validator.from_fields([{"name": "email", "type": "Email", "required": True}])
        teams = Validator()
        teams.add_field({"name": "players", "type": "Array", "validator": players})
        league = Validator()
        league.add_field({"name": "teams", "type": "Array", "validator": teams, "required": True})

        result = league.validate({"teams": [{"players": [{"email": "a@example.com"}, {"email": "bad"}]}]})

        assert result.errors == "'teams' 'players' 'email' must be valid e-mail address!"


class TestSchemaProperties:
    @pytest.mark.parametrize("allowed", [["a"], ["red", "green"], ["x", "y", "z", "w"]])
    def test_enum_error_lists_all_allowed_values(self, allowed):
        validator = Validator()
        validator.add_field({"name": "color", "type": "String", "options": {"enum": allowed}})

        result = validator.validate({"color": "not-allowed"})

        assert " or ".join(allowed) in result.errors

    @pytest.mark.parametrize("value, expected", [(4, "must be min 5!"), (11, "must be max 10!"), (5, None), (10, None)])
    def test_number_bounds(self, value, expected):
        validator = Validator()
        validator.add_field({"name": "n", "type": "Number", "options": {"min": 5, "max": 10}})

        result = validator.validate({"n": value})

        assert result.errors == (f"'n' {expected}" if expected else None)

    def test_array_failure_mentions_each_invalid_element(self):
        validator = Validator()
        validator.add_field({"name": "emails", "type": "Array", "options": {"arrayValuesType": "Email"}})

        assert validator.validate({"emails": ["a@example.com", "b@example.com"]}).success
        result = validator.validate({"emails": ["a@example.com", "broken", "also broken"]})

        assert "'broken'" in result.errors
        assert "'also broken'" in result.errors
        assert "'a@example.com'" not in result.errors

    def test_required_only_reported_in_strict_mode(self):
        validator = Validator()
        validator.add_field({"name": "id", "type": "Identifier", "required": True})

        assert validator.validate({}, strict=True).errors == "Missing field 'id'"
        assert validator.validate({}, strict=False).success is True

    def test_dotted_path_resolution(self):
        validator = Validator()
        validator.add_field({"name": "address.city", "type": "String", "required": True})

        assert validator.validate({"address": {"city": "Sofia"}}).success is True
        assert validator.validate({"address": None}).errors == "Missing field 'address.city'"
        assert validator.validate({}, strict=False).success is True

    def test_validation_is_repeatable(self, player_validator, sample_player):
        record = {**sample_player, "age": 150, "positions": ["GK", "XX"]}

        first = player_validator.validate(record)
        second = player_validator.validate(record)

        assert first == second
        assert first.success is False
        assert record["age"] == 150
