from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from lagos_price.controller import PredictionFormController
from lagos_price.core.config import COUNT_FIELDS, TITLES, TOWNS
from lagos_price.core.deps import new_controller
from lagos_price.core.templates import templates

router = APIRouter(tags=["form"])


def render_form(request: Request, controller: PredictionFormController) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": request.app.title,
            "form": controller.form.model_dump(),
            "towns": TOWNS,
            "titles": TITLES,
            "count_fields": COUNT_FIELDS,
            "submitting": controller.is_submitting,
            "prediction": controller.prediction,
            "error": controller.error,
            "error_field": controller.result.field if controller.result else None,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, controller: PredictionFormController = Depends(new_controller)):
    return render_form(request, controller)


@router.post("/", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    bedrooms: str = Form("", description="Number of bedrooms"),
    bathrooms: str = Form("", description="Number of bathrooms"),
    toilets: str = Form("", description="Number of toilets"),
    parking_space: str = Form("", description="Number of parking spaces"),
    town: str = Form("", description="Town, one of the listed Lagos towns"),
    title: str = Form("", description="Property type"),
    controller: PredictionFormController = Depends(new_controller),
):
    """
    Plain HTML form post: run one prediction and re-render the page with the
    entered values and either the price or an error. Always 200, errors are
    shown on the page.
    """
    controller.update_fields(
        {
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "toilets": toilets,
            "parking_space": parking_space,
            "town": town,
            "title": title,
        }
    )
    await controller.submit()
    return render_form(request, controller)
