from fastapi.templating import Jinja2Templates

from storefront.config import TEMPLATES_DIR
from storefront.utils.money import format_ngn

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["ngn"] = format_ngn
