import logging
from typing import Any, Dict, List, Protocol

from pyairtable import Api

from ..core.config import Settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordSource(Protocol):
    """Anything that can list the raw records of a named view."""

    def list_records(self, view: str) -> List[Record]:
        ...


class AirtableRecordSource:
    """Record source backed by a single Airtable table.

    Only the first page of the view is read, and the client's automatic
    retry on rate limiting is turned off: a failed call fails the request.
    """

    def __init__(self, api_key: str, base_id: str, table_name: str, endpoint_url: str = "https://api.airtable.com"):
        self.base_id = base_id
        self.table_name = table_name
        self.api = Api(api_key, retry_strategy=None, endpoint_url=endpoint_url)
        self.table = self.api.table(base_id, table_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AirtableRecordSource":
        return cls(
            api_key=settings.airtable_api_key,
            base_id=settings.airtable_base_id,
            table_name=settings.airtable_table_name,
            endpoint_url=settings.airtable_endpoint_url,
        )

    def list_records(self, view: str) -> List[Record]:
        logger.debug(f"Querying Airtable table '{self.table_name}' (view '{view}')")
        first_page = next(iter(self.table.iterate(view=view)), [])
        return list(first_page)
