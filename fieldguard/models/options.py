"""Field types and per-type option bundles."""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import Field, ValidationError, ValidationInfo, field_validator, model_validator

from ..core.exceptions import SchemaDefinitionError
from .base import FieldguardBaseModel


class FieldType(str, Enum):
    """Types a field can be registered with."""

    STRING = "String"
    NUMBER = "Number"
    DATE = "Date"
    BOOLEAN = "Boolean"
    EMAIL = "Email"
    URL = "URL"
    IDENTIFIER = "Identifier"
    ARRAY = "Array"

    @classmethod
    def _missing_(cls, value: object) -> Optional["FieldType"]:
        # "Mongo" is the older name for object ids
        if value == "Mongo":
            return cls.IDENTIFIER
        return None


class CharacterSet(str, Enum):
    """Character classes a string may be restricted to."""

    LETTERS_ONLY = "lettersOnly"
    NUMBERS_ONLY = "numbersOnly"
    LETTERS_AND_NUMBERS = "lettersAndNumbers"


def _check_bounds(low: Optional[float], high: Optional[float], low_name: str, high_name: str) -> None:
    if low is not None and high is not None and low > high:
        raise ValueError(f"Wrong params! {high_name} must be greater than {low_name}")


class EmptyOptions(FieldguardBaseModel):
    """Options for types that take no constraints."""


class StringOptions(FieldguardBaseModel):
    """Constraints for String fields."""

    min_symbols: Optional[int] = Field(default=None, ge=0, alias="minSymbols")
    max_symbols: Optional[int] = Field(default=None, ge=0, alias="maxSymbols")
    can_be_empty: bool = Field(default=True, alias="canBeEmpty")
    # None means "not configured": spaces are neither rejected nor allowed
    # in a numbers-only value.
    allow_spaces: Optional[bool] = Field(default=None, alias="allowSpaces")
    max_words: Optional[int] = Field(default=None, ge=0, alias="maxWords")
    black_list: Optional[Tuple[str, ...]] = Field(default=None, alias="blackList")
    include: Optional[CharacterSet] = None
    enum_values: Optional[Tuple[str, ...]] = Field(default=None, alias="enum")

    @model_validator(mode="after")
    def _bounds(self) -> "StringOptions":
        _check_bounds(self.min_symbols, self.max_symbols, "minSymbols", "maxSymbols")
        return self


class NumberOptions(FieldguardBaseModel):
    """Constraints for Number fields."""

    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None

    @model_validator(mode="after")
    def _bounds(self) -> "NumberOptions":
        _check_bounds(self.min, self.max, "min", "max")
        return self


class ArrayOptions(FieldguardBaseModel):
    """Constraints for Array fields.

    ``array_values_options`` is coerced into the options model matching
    ``array_values_type``, so it must be declared after it.
    """

    min_records: Optional[int] = Field(default=None, ge=0, alias="minRecords")
    max_records: Optional[int] = Field(default=None, ge=0, alias="maxRecords")
    array_values_type: Optional[FieldType] = Field(default=None, alias="arrayValuesType")
    array_values_options: Optional[Any] = Field(default=None, alias="arrayValuesOptions")

    @field_validator("array_values_options", mode="before")
    @classmethod
    def _coerce_values_options(cls, value: Any, info: ValidationInfo) -> Any:
        values_type = info.data.get("array_values_type")
        if values_type is None:
            if value is not None:
                raise ValueError("arrayValuesOptions requires arrayValuesType")
            return None

        model = options_model_for(values_type)
        if value is None:
            return model()
        try:
            return model.model_validate(value)
        except ValidationError as e:
            raise ValueError(describe_errors(e)) from e

    @model_validator(mode="after")
    def _bounds(self) -> "ArrayOptions":
        _check_bounds(self.min_records, self.max_records, "minRecords", "maxRecords")
        return self


RuleOptions = Union[StringOptions, NumberOptions, ArrayOptions, EmptyOptions]
OptionsT = TypeVar("OptionsT", StringOptions, NumberOptions, ArrayOptions, EmptyOptions)

_OPTIONS_MODELS: Dict[FieldType, Type[FieldguardBaseModel]] = {
    FieldType.STRING: StringOptions,
    FieldType.NUMBER: NumberOptions,
    FieldType.ARRAY: ArrayOptions,
}


def options_model_for(field_type: FieldType) -> Type[FieldguardBaseModel]:
    """Return the options model used by a field type."""
    return _OPTIONS_MODELS.get(field_type, EmptyOptions)


def describe_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def coerce_options(
    model: Type[OptionsT],
    options: Union[OptionsT, Mapping[str, Any], None],
    field: Optional[str] = None,
) -> OptionsT:
    """Turn a mapping (or None) into the given options model.

    Raises SchemaDefinitionError when the bundle doesn't fit the model.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if not isinstance(options, Mapping):
        raise SchemaDefinitionError(
            f"Invalid 'options'! Must be a mapping, got {type(options).__name__}", field
        )
    try:
        return model.model_validate(options)
    except ValidationError as e:
        raise SchemaDefinitionError(f"Invalid 'options': {describe_errors(e)}", field) from e
