from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _document_create_constraints(schema: Dict[str, Any]) -> None:
    # Published in the API docs only; decoding fills missing fields with zero values.
    schema["required"] = ["name", "email", "age"]
    for prop in schema.get("properties", {}).values():
        prop.pop("default", None)


class User(BaseModel):
    """
    User representation returned by the API.
    """
    id: int = Field(..., title="User ID", examples=[1])
    name: str = Field(..., title="Name", examples=["John Doe"])
    email: str = Field(..., title="Email", examples=["john@example.com"])
    age: int = Field(..., title="Age", examples=[30])


class CreateUserRequest(BaseModel):
    """
    Request body for creating or updating a user.

    Decoding follows the usual JSON-to-struct rules:

    - keys match field names case-insensitively, a later key overriding an
      earlier one (``{"Name": "Bob"}`` sets ``name``)
    - missing fields take their zero value and a ``null`` leaves the field as is
    - field types are enforced strictly, so ``"age": "30"`` does not decode
    - ``age`` must fit a signed 64-bit integer
    - unknown keys are ignored
    """
    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        json_schema_extra=_document_create_constraints,
    )
    name: str = Field(default="", title="Name", examples=["John Doe"])
    email: str = Field(
        default="", title="Email", examples=["john@example.com"],
        json_schema_extra={"format": "email"},
    )
    age: int = Field(
        default=0, title="Age", examples=[30],
        json_schema_extra={"minimum": 1},
    )

    @model_validator(mode="before")
    @classmethod
    def fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {}
        for key, value in data.items():
            name = key.casefold() if isinstance(key, str) else key
            if name in cls.model_fields and value is not None:
                fields[name] = value
        return fields

    @field_validator("age")
    @classmethod
    def age_fits_int64(cls, v: int) -> int:
        if not INT64_MIN <= v <= INT64_MAX:
            raise ValueError("age is out of range for a 64-bit integer")
        return v
