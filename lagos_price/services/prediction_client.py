"""
HTTP client for the external price-prediction service.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from lagos_price.core.config import Settings
from lagos_price.schemas.form import PredictionRequest, PredictionResponse

logger = logging.getLogger(__name__)


class PredictionServiceError(Exception):
    """Transport failure or non-2xx reply from the prediction service"""
    pass


class UnexpectedResponseError(PredictionServiceError):
    """Reply arrived but does not carry a usable predicted_price"""
    pass


class PredictionClient:
    """
    Thin wrapper around an httpx.AsyncClient bound to one prediction endpoint.

    One call to predict() is exactly one POST; there is no retry.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.url = settings.predict_url
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def predict(self, payload: PredictionRequest) -> float:
        body = payload.model_dump()
        logger.debug("POST %s %s", self.url, body)

        try:
            resp = await self._client.post(self.url, json=body)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise PredictionServiceError(f"Prediction request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise UnexpectedResponseError("Response body is not JSON") from e

        if not isinstance(data, dict):
            raise UnexpectedResponseError(f"Expected a JSON object, got {type(data).__name__}")

        try:
            parsed = PredictionResponse.model_validate(data)
        except ValidationError as e:
            raise UnexpectedResponseError(f"Invalid prediction response: {e}") from e

        return parsed.predicted_price

    async def aclose(self) -> None:
        await self._client.aclose()
