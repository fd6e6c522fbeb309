from .generator import generate_landing_page
from .models import Product
from .template import render_page

__all__ = ["generate_landing_page", "Product", "render_page"]
