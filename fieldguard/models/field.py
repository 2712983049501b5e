"""Field descriptor and validation result models."""

from typing import Any, List, Optional

from pydantic import ConfigDict, Field, ValidationInfo, field_validator, model_validator

from .base import FieldguardBaseModel
from .options import FieldType, RuleOptions, coerce_options, options_model_for

ERROR_DELIMITER = " | "


class FieldDescriptor(FieldguardBaseModel):
    """Compiled registration record for one field."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(min_length=1, description="Field name, dotted for nested access")
    type: FieldType = Field(description="Rule used for the field's value")
    options: Optional[Any] = Field(
        default=None, validate_default=True, description="Options model for the type"
    )
    required: bool = Field(default=False, description="Report absence in strict mode")
    validator: Optional[Any] = Field(
        default=None, description="Nested validator for arrays of records"
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Field name can't be blank")
        return value

    @field_validator("options", mode="before")
    @classmethod
    def _coerce_options(cls, value: Any, info: ValidationInfo) -> Any:
        if "type" not in info.data:
            return value
        return coerce_options(options_model_for(info.data["type"]), value, info.data.get("name"))

    @property
    def rule_options(self) -> RuleOptions:
        """Options model for the field's rule."""
        if not isinstance(self.options, FieldguardBaseModel):
            return options_model_for(self.type)()
        return self.options


class ValidationResult(FieldguardBaseModel):
    """Outcome of one validation pass."""

    success: bool = Field(description="Whether the record passed")
    errors: Optional[str] = Field(default=None, description="Every problem, joined")

    @model_validator(mode="after")
    def _errors_match_success(self) -> "ValidationResult":
        if self.success and self.errors is not None:
            raise ValueError("A successful result can't carry errors")
        if not self.success and not self.errors:
            raise ValueError("A failed result must carry errors")
        return self

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        """Build a result from the collected error messages."""
        if errors:
            return cls(success=False, errors=ERROR_DELIMITER.join(errors))
        return cls(success=True, errors=None)

    def to_dict(self) -> dict:
        """Payload sent back by the request-pipeline adaptor."""
        return self.model_dump()
