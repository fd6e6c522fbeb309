from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import Product

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def _blank_none(value):
    # Missing product attributes render as empty text, not "None"
    return "" if value is None else value


_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    finalize=_blank_none,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def render_page(products: Sequence[Product], error_message: Optional[str] = None) -> str:
    """Return the landing page document: one card per product, or the empty state when there are none."""
    template = _env.get_template("index.html")
    return template.render(products=list(products), error_message=error_message)
