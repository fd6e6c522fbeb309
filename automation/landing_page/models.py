from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
	"""A product as served by the landing page API; every attribute may be null, and values are taken as the API sends them."""

	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	id: Optional[Any] = None
	title: Optional[Any] = None
	summary: Optional[Any] = None
	image_url: Optional[Any] = Field(default=None, alias="imageUrl")
	mercado_libre_url: Optional[Any] = Field(default=None, alias="mercadoLibreUrl")
	whatsapp_link: Optional[Any] = Field(default=None, alias="whatsappLink")
