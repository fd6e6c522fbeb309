import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...models.product import ErrorResponse, Product
from ...services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_ERROR_MESSAGE = "No se pudo obtener los datos de los productos."


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


@router.get("", response_model=List[Product], responses={500: {"model": ErrorResponse}})
def get_products(service: ProductService = Depends(get_product_service)):
    """List the products of the configured Airtable view."""
    logger.info("Recibida petición para /api/productos")
    try:
        return service.get_all_products()
    except Exception as exc:
        logger.exception("Error al obtener datos de Airtable", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})
