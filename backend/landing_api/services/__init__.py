from .product_service import ProductService, record_to_product
from .record_source import AirtableRecordSource, RecordSource

__all__ = ["ProductService", "record_to_product", "AirtableRecordSource", "RecordSource"]
