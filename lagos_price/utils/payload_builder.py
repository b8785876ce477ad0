from pydantic import ValidationError

from lagos_price.core.config import COUNT_FIELDS, MSG_MISSING_FIELDS
from lagos_price.schemas.form import FormState, PredictionRequest


class FormValidationError(ValueError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


def field_label(name: str) -> str:
    """'parking_space' -> 'Parking Space'"""
    return name.replace("_", " ").title()


def _message_for(field: str | None) -> str:
    if field is None:
        return "Invalid form values."
    if field in COUNT_FIELDS:
        return f"{field_label(field)} must be a whole number of 0 or more."
    if field == "town":
        return "Please select a town from the list."
    if field == "title":
        return "Please select a property type from the list."
    return f"Invalid value for {field_label(field)}."


def build_payload(form: FormState) -> PredictionRequest:
    """
    Turn the raw form values into the request body for the prediction service.

    Counts are coerced to int, town/title are passed through verbatim.
    Raises FormValidationError for the first empty or invalid field, so a
    half-filled or non-numeric form never reaches the network.
    """
    missing = form.missing_fields()
    if missing:
        raise FormValidationError(MSG_MISSING_FIELDS, field=missing[0])

    try:
        return PredictionRequest.model_validate(form.model_dump())
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        raise FormValidationError(_message_for(field), field=field) from e
