from .product import ErrorResponse, Product

__all__ = [
	"ErrorResponse",
	"Product",
]
