# lagos_price/main.py
from dotenv import load_dotenv
import logging
from typing import Optional
import httpx
from fastapi.staticfiles import StaticFiles
from fastapi import FastAPI
import uvicorn
from contextlib import asynccontextmanager
from lagos_price.api import inputs, api
from lagos_price.core.config import STATIC_DIR, Settings, get_settings
from lagos_price.services.prediction_client import PredictionClient

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the app around an explicit Settings object. `transport` is handed to
    httpx so tests can stand in for the prediction service.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 App starting up, prediction service at %s", settings.predict_url)
        client = PredictionClient(settings, transport=transport)
        app.state.prediction_client = client

        yield

        await client.aclose()
        app.state.prediction_client = None
        logger.info("🧹 App shutting down, cleanup complete.")

    app = FastAPI(lifespan=lifespan, title=settings.app_title)
    app.state.settings = settings

    app.include_router(inputs.router)
    app.include_router(api.router)

    @app.get("/ping")
    def ping():
        return "pong"

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("lagos_price.main:app", host="0.0.0.0", port=8000)
