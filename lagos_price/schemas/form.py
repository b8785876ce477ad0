# lagos_price/schemas/form.py
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from lagos_price.core.config import TITLES, TOWNS

Town = Literal[tuple(TOWNS)]
PropertyTitle = Literal[tuple(TITLES)]


class FormState(BaseModel):
    # raw values as typed/selected; nothing is checked until submit
    bedrooms: str = ""
    bathrooms: str = ""
    toilets: str = ""
    parking_space: str = ""
    town: str = ""
    title: str = ""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, coerce_numbers_to_str=True)

    def missing_fields(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if not value]


class PredictionRequest(BaseModel):
    """Body POSTed to the prediction service."""

    bedrooms: int = Field(ge=0)
    bathrooms: int = Field(ge=0)
    toilets: int = Field(ge=0)
    parking_space: int = Field(ge=0)
    town: Town
    title: PropertyTitle

    model_config = ConfigDict(extra="forbid")


class PredictionResponse(BaseModel):
    # strict: "123" or true must not pass as a price
    predicted_price: float = Field(strict=True, allow_inf_nan=False)

    model_config = ConfigDict(extra="ignore")


class PredictionResult(BaseModel):
    predicted_price: Optional[float] = None
    error: Optional[str] = None
    # set when the error comes from a form field rather than the service
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.predicted_price is not None
