# lagos_price/core/deps.py
from __future__ import annotations
from fastapi import Request
from lagos_price.controller import PredictionFormController
from lagos_price.services.prediction_client import PredictionClient


def get_prediction_client(request: Request) -> PredictionClient:
    """Shared client opened in the app lifespan."""
    client = getattr(request.app.state, "prediction_client", None)
    if client is None:
        raise RuntimeError("PredictionClient is not initialized yet (startup not completed).")
    return client


def new_controller(request: Request) -> PredictionFormController:
    """One controller per page render/submission; nothing outlives the request."""
    return PredictionFormController(get_prediction_client(request))
