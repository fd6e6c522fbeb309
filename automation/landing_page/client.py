"""HTTP client for the landing page API."""

import logging
from typing import List, Optional

import requests
from pydantic import TypeAdapter

from .models import Product

logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(List[Product])


class ProductFetchError(Exception):
    """The API answered with a non-success status."""


def fetch_products(url: str, session: Optional[requests.Session] = None) -> List[Product]:
    """
    Fetch the product list from the API.

    Args:
        url: Products endpoint
        session: Optional requests session to issue the call with

    Returns:
        Products in the order the API returned them

    Raises:
        ProductFetchError: if the API responds with a non-success status
        requests.RequestException: on transport failures
        ValueError: if the body is not a JSON array of products
    """
    http = session or requests
    response = http.get(url)

    if not response.ok:
        raise ProductFetchError(f"Error en la respuesta de la API: {response.reason}")

    products = _products_adapter.validate_python(response.json())
    logger.info(f"Datos de {len(products)} productos obtenidos.")
    return products
