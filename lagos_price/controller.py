# lagos_price/controller.py
import logging
from enum import Enum
from typing import Any, Optional

from lagos_price.core.config import MSG_SERVICE_ERROR, MSG_UNEXPECTED_RESPONSE
from lagos_price.schemas.form import FormState, PredictionResult
from lagos_price.services.prediction_client import (
    PredictionClient,
    PredictionServiceError,
    UnexpectedResponseError,
)
from lagos_price.utils.payload_builder import FormValidationError, build_payload

logger = logging.getLogger(__name__)


class SubmitState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


class PredictionFormController:
    """
    Owns the form values and the latest prediction outcome for one page session.

    submit() walks idle -> submitting -> success/failure. A submit() issued
    while another is in flight is dropped, so at most one request is ever
    outstanding per controller.
    """

    def __init__(self, client: PredictionClient, form: Optional[FormState] = None):
        self.client = client
        self.form = form or FormState()
        self.state = SubmitState.IDLE
        self.result: Optional[PredictionResult] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmitState.SUBMITTING

    @property
    def error(self) -> str:
        if self.result is None or self.result.error is None:
            return ""
        return self.result.error

    @property
    def prediction(self) -> Optional[float]:
        if self.result is None:
            return None
        return self.result.predicted_price

    def update_field(self, name: str, value: Any) -> None:
        if name not in FormState.model_fields:
            raise ValueError(f"Unknown form field: {name!r}")

        raw = "" if value is None else str(value)
        self.form = FormState.model_validate({**self.form.model_dump(), name: raw})

        # editing dismisses the last error but keeps a shown price
        if self.result is not None and self.result.error is not None:
            self.result = None

    def update_fields(self, values: dict) -> None:
        for name, value in values.items():
            self.update_field(name, value)

    async def submit(self) -> Optional[PredictionResult]:
        if self.is_submitting:
            logger.warning("Submit ignored: a prediction request is already in flight")
            return self.result

        self.state = SubmitState.SUBMITTING
        self.result = None

        try:
            self.result = await self._run()
        finally:
            self.state = SubmitState.SUCCESS if self.result and self.result.ok else SubmitState.FAILURE

        return self.result

    async def _run(self) -> PredictionResult:
        try:
            payload = build_payload(self.form)
        except FormValidationError as e:
            logger.info("Form rejected before submit (%s): %s", e.field, e.message)
            return PredictionResult(error=e.message, field=e.field)

        try:
            price = await self.client.predict(payload)
        except UnexpectedResponseError:
            logger.exception("Prediction service returned an unexpected response")
            return PredictionResult(error=MSG_UNEXPECTED_RESPONSE)
        except PredictionServiceError:
            logger.exception("Prediction request failed")
            return PredictionResult(error=MSG_SERVICE_ERROR)

        logger.info("Predicted price %s for %s", price, payload.model_dump())
        return PredictionResult(predicted_price=price)
