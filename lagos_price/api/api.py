from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import ORJSONResponse
from lagos_price.controller import PredictionFormController
from lagos_price.core.config import TITLES, TOWNS
from lagos_price.core.deps import new_controller
from lagos_price.schemas.form import FormState
from lagos_price.utils.filters import naira

router = APIRouter(prefix="/api")


@router.post("/predict", response_class=ORJSONResponse)
async def api_predict(
    form: FormState,
    controller: PredictionFormController = Depends(new_controller),
):
    """
    JSON twin of the HTML form. Takes the raw form values, returns the
    predicted price and its display string.
    """
    controller.update_fields(form.model_dump())
    result = await controller.submit()

    if result is None or not result.ok:
        detail = result.error if result is not None else "No prediction produced"
        # field errors are the caller's fault, anything else is upstream
        status = 422 if result is not None and result.field else 502
        raise HTTPException(status_code=status, detail=detail)

    content = {
        "predicted_price": result.predicted_price,
        "formatted": naira(result.predicted_price),
    }
    return ORJSONResponse(content=content, status_code=200)


@router.get("/options")
def options():
    return {"towns": TOWNS, "titles": TITLES}
