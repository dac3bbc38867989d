from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator


def _numeric_or_empty(value: Any) -> float:
    """Coerce a number, a numeric string or a placeholder such as "-" to float.

    Anything that is not a number resolves to 0.0 instead of failing the
    whole response.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        if value.strip() == "-":
            return 0.0
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


NumericOrEmpty = Annotated[float, BeforeValidator(_numeric_or_empty)]


class WallexModel(BaseModel):
    """Lenient base for Wallex wire types.

    Fields are addressed by snake_case name or by the exchange's key (alias),
    unknown keys are ignored, JSON numbers are accepted for string fields, and
    explicit nulls fall back to the field default.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class BaseResponse(WallexModel):
    """Envelope shared by every Wallex endpoint."""

    message: str = ""
    success: bool = False
    result: Any = None


class ErrorResponse(BaseResponse):
    """Documented error envelope: message, success, numeric code and result."""

    code: int = 0
