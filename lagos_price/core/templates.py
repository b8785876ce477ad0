from fastapi.templating import Jinja2Templates
from lagos_price.core.config import TEMPLATES_DIR
from lagos_price.utils import filters
from lagos_price.utils.payload_builder import field_label

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# register filters globally
templates.env.filters["naira"] = filters.naira
templates.env.filters["comma"] = filters.comma
templates.env.filters["label"] = field_label
