# lagos_price/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[2]

TEMPLATES_DIR = ROOT_DIR / "templates"
STATIC_DIR = ROOT_DIR / "static"

# closed sets offered by the form dropdowns
TOWNS = [
    "Ikoyi",
    "Lekki",
    "Victoria Island",
    "Yaba",
    "Surulere",
    "Ikeja",
    "Ajah",
    "Maryland",
    "Ogudu",
    "Other",
]

TITLES = [
    "Detached Duplex",
    "Semi-Detached Duplex",
    "Terraced Duplex",
    "Bungalow",
    "Block of Flats",
    "Penthouse",
    "Other",
]

# numeric form inputs, in display order
COUNT_FIELDS = ["bedrooms", "bathrooms", "toilets", "parking_space"]

CURRENCY_SYMBOL = "₦"

# user-facing messages
MSG_SERVICE_ERROR = "Unable to fetch prediction. Please try again."
MSG_UNEXPECTED_RESPONSE = "Unexpected response from API."
MSG_MISSING_FIELDS = "Please fill in all fields."


class Settings(BaseSettings):
    """Runtime settings, read from the environment (and .env) unless passed explicitly."""

    app_title: str = "Lagos House Price Predictor"
    prediction_api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the prediction service; /predict is appended",
    )
    # httpx's own default
    request_timeout: float = Field(default=5.0, gt=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def predict_url(self) -> str:
        return f"{self.prediction_api_url.rstrip('/')}/predict"


@lru_cache
def get_settings() -> Settings:
    return Settings()
