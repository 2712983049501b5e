"""Schema registry: ordered fields validated against records."""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..config.logging import LoggerMixin
from ..core.exceptions import FieldNotFoundError, MissingValueError, SchemaDefinitionError
from ..models.field import FieldDescriptor, ValidationResult
from ..models.options import FieldType, describe_errors
from ..rules.arrays import apply_rule
from ..rules.common import MISSING, is_missing, is_success
from .middleware import Dependency, Dispatch, create_dependency, create_dispatch
from .resolve import resolve_field

FieldDefinition = Union[Mapping[str, Any], FieldDescriptor]


class Validator(LoggerMixin):
    """Ordered collection of fields a record is validated against.

    Fields are only ever appended, during setup. Validation reads the schema
    and the record without changing either, so a fully built validator can
    be shared between concurrent requests.

    Example:
        schema = Validator()
        schema.add_field({"name": "age", "type": "Number", "options": {"min": 0, "max": 99}, "required": True})
        schema.validate({"age": 150})  # success=False, errors="'age' must be max 99!"
    """

    def __init__(self) -> None:
        self._fields: Dict[str, FieldDescriptor] = {}

    @classmethod
    def from_fields(cls, fields: Iterable[FieldDefinition]) -> "Validator":
        """Build a validator from field definitions.

        A nested ``validator`` may itself be a list of field definitions.
        """
        validator = cls()
        for field in fields:
            if isinstance(field, Mapping) and isinstance(field.get("validator"), (list, tuple)):
                field = {**field, "validator": cls.from_fields(field["validator"])}
            validator.add_field(field)
        return validator

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Registered field names in registration order."""
        return tuple(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Validator(fields={list(self._fields)})"

    def get_field(self, name: str) -> FieldDescriptor:
        """Return the descriptor registered under ``name``."""
        try:
            return self._fields[name]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def add_field(self, field: FieldDefinition) -> None:
        """Register a new field.

        ``field`` takes ``name`` and ``type`` plus optional ``options``,
        ``required`` and ``validator`` (a nested Validator, Array fields only).

        Example:
            schema.add_field({"name": "nickname", "type": "String", "options": {"maxWords": 3, "include": "lettersOnly"}})
        """
        if isinstance(field, FieldDescriptor):
            self._check_unique(field.name)
            descriptor = field
        elif isinstance(field, Mapping):
            descriptor = self._compile(field)
        else:
            raise SchemaDefinitionError("Invalid 'field'! Must be a mapping")

        self._check_nested(descriptor)
        self._fields[descriptor.name] = descriptor

        self.logger.debug(
            "Field registered",
            field=descriptor.name,
            type=descriptor.type.value,
            required=descriptor.required,
            nested=descriptor.validator is not None,
        )

    def _check_unique(self, name: str) -> None:
        if name in self._fields:
            raise SchemaDefinitionError(f"Already have field with name '{name}'", name)

    def _compile(self, field: Mapping[str, Any]) -> FieldDescriptor:
        for key in ("name", "type"):
            if key not in field:
                raise SchemaDefinitionError(f"Missing field '{key}'")

        name = field["name"]
        if not isinstance(name, str) or not name.strip():
            raise SchemaDefinitionError("Invalid 'name'! Must be a non-empty string")
        self._check_unique(name)

        try:
            field_type = FieldType(field["type"])
        except (ValueError, TypeError):
            valid = ", ".join(item.value for item in FieldType)
            raise SchemaDefinitionError(f"Invalid 'type'! Must be one of: {valid}", name) from None

        try:
            return FieldDescriptor.model_validate({**field, "type": field_type})
        except ValidationError as e:
            raise SchemaDefinitionError(f"Invalid field '{name}': {describe_errors(e)}", name) from e

    def _check_nested(self, descriptor: FieldDescriptor) -> None:
        nested = descriptor.validator
        if nested is None:
            return
        if not isinstance(nested, Validator):
            raise SchemaDefinitionError(
                "Invalid validator! Must be instance of Validator class", descriptor.name
            )
        if descriptor.type is not FieldType.ARRAY:
            raise SchemaDefinitionError(
                "Nested validator is only allowed for 'Array' fields", descriptor.name
            )
        if nested._reaches(self):
            raise SchemaDefinitionError("Validator can't nest itself", descriptor.name)

    def _reaches(self, target: "Validator") -> bool:
        """Whether ``target`` is this validator or nested anywhere below it."""
        pending: List[Validator] = [self]
        seen = set()
        while pending:
            current = pending.pop()
            if current is target:
                return True
            if id(current) in seen:
                continue
            seen.add(id(current))
            pending.extend(
                descriptor.validator
                for descriptor in current._fields.values()
                if descriptor.validator is not None
            )
        return False

    def validate_single(self, name: str, value: Any = MISSING) -> str:
        """Run one field's rule on ``value`` and return the raw outcome.

        Nested validators aren't applied. Raises FieldNotFoundError for
        unknown fields and MissingValueError when no value is passed.
        """
        descriptor = self.get_field(name)
        if value is MISSING:
            raise MissingValueError(name)
        return apply_rule(descriptor.type, value, descriptor.rule_options)

    def validate(self, record: Any, strict: bool = True) -> ValidationResult:
        """Validate a record, or every record of a list.

        Errors from all list elements are collected into one flat report
        without element indexes. In strict mode absent required fields are
        reported as missing.
        """
        return self._run(self._fields.values(), record, strict)

    def validate_fields(
        self,
        names: Union[str, Iterable[str]],
        record: Any,
        strict: bool = True,
    ) -> ValidationResult:
        """Validate only the named fields (a space-delimited string or an iterable)."""
        requested = names.split() if isinstance(names, str) else list(names)
        for name in requested:
            if name not in self._fields:
                raise FieldNotFoundError(name)

        wanted = set(requested)
        selected = [descriptor for descriptor in self._fields.values() if descriptor.name in wanted]
        return self._run(selected, record, strict)

    def middleware(
        self,
        error_status: int = 422,
        strict: bool = True,
        paths: Optional[Iterable[str]] = None,
    ) -> Dispatch:
        """Return a FastAPI/Starlette ``dispatch(request, call_next)`` callable.

        Installed app wide, so pass ``paths`` to leave other routes alone.

        Example:
            app.middleware("http")(schema.middleware(error_status=400, paths=["/signup"]))
        """
        return create_dispatch(self, error_status, strict, paths)

    def dependency(self, error_status: int = 422, strict: bool = True) -> Dependency:
        """Return a FastAPI dependency validating the body of one route.

        Needs ``install_error_handler(app)`` for the failure response.

        Example:
            @app.post("/signup")
            async def signup(body=Depends(schema.dependency())):
                ...
        """
        return create_dependency(self, error_status, strict)

    def _run(
        self,
        descriptors: Iterable[FieldDescriptor],
        record: Any,
        strict: bool,
    ) -> ValidationResult:
        descriptors = list(descriptors)
        records = record if isinstance(record, list) else [record]

        errors: List[str] = []
        for current in records:
            errors.extend(self._validate_object(descriptors, current, strict))
        return ValidationResult.from_errors(errors)

    def _validate_object(
        self,
        descriptors: List[FieldDescriptor],
        record: Any,
        strict: bool,
    ) -> List[str]:
        errors: List[str] = []
        for descriptor in descriptors:
            value = resolve_field(record, descriptor.name)

            if is_missing(value):
                if descriptor.required and strict:
                    errors.append(f"Missing field '{descriptor.name}'")
                continue

            outcome = apply_rule(descriptor.type, value, descriptor.rule_options)
            if not is_success(outcome):
                errors.append(f"'{descriptor.name}' {outcome}")

            if descriptor.validator is not None and isinstance(value, list):
                nested = descriptor.validator.validate(value, strict)
                if not nested.success:
                    errors.append(f"'{descriptor.name}' {nested.errors}")

        return errors
