import logging
from typing import Any, List, Optional

from ..models.product import Product
from .record_source import Record, RecordSource

logger = logging.getLogger(__name__)

# Airtable column names
TITLE_FIELD = "Titulo"
SUMMARY_FIELD = "Resumen"
IMAGE_FIELD = "URL Imagen"
MERCADO_LIBRE_FIELD = "Enlace MercadoLibre"
WHATSAPP_FIELD = "Enlace WhatsApp"


def _image_url(value: Any) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, str):
        return value
    first = value[0]
    if isinstance(first, dict):
        return first.get("url")
    return None


def record_to_product(record: Record) -> Product:
    """Map one raw record to a Product. Missing columns are not an error; they map to None."""
    fields = record.get("fields") or {}
    return Product(
        id=record["id"],
        title=fields.get(TITLE_FIELD),
        summary=fields.get(SUMMARY_FIELD),
        image_url=_image_url(fields.get(IMAGE_FIELD)),
        mercado_libre_url=fields.get(MERCADO_LIBRE_FIELD),
        whatsapp_link=fields.get(WHATSAPP_FIELD),
    )


class ProductService:
    def __init__(self, record_source: RecordSource, view: str):
        self.record_source = record_source
        self.view = view

    def get_all_products(self) -> List[Product]:
        records = self.record_source.list_records(self.view)
        products = [record_to_product(record) for record in records]
        logger.info(f"Productos encontrados: {len(products)}")
        return products
