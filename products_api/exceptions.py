from typing import List

from fastapi import Request, status
from fastapi.responses import JSONResponse

from products_api.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCT_NOT_FOUND = "Producto no encontrado"
INTERNAL_ERROR = "Error interno del servidor"


class RequestValidationFailed(Exception):
    """One or more validation rules failed for the request"""

    def __init__(self, errors: List[dict]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


class ProductNotFound(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


async def validation_failed_handler(request: Request, exc: RequestValidationFailed):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


async def product_not_found_handler(request: Request, exc: ProductNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": PRODUCT_NOT_FOUND},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


def register_exception_handlers(app):
    app.add_exception_handler(RequestValidationFailed, validation_failed_handler)
    app.add_exception_handler(ProductNotFound, product_not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
