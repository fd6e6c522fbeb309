from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
	"""A product row from the record store, reshaped for the landing page.

	Only ``id`` is guaranteed. The other attributes are whatever the record
	carried, passed through untyped; a missing column becomes ``None``
	(serialized as ``null``).
	"""

	model_config = ConfigDict(populate_by_name=True)

	id: str
	title: Optional[Any] = None
	summary: Optional[Any] = None
	image_url: Optional[Any] = Field(default=None, alias="imageUrl")
	mercado_libre_url: Optional[Any] = Field(default=None, alias="mercadoLibreUrl")
	whatsapp_link: Optional[Any] = Field(default=None, alias="whatsappLink")


class ErrorResponse(BaseModel):
	error: str
