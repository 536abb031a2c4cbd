# routes/product.py
from typing import List
from fastapi import APIRouter, Depends, status

from products_api.config import API_PREFIX
from products_api.database.dependencies import get_product_service
from products_api.docs import id_parameter, json_body
from products_api.exceptions import ProductNotFound
from products_api.services.product import ProductService
from products_api.models.schemas.base import DataResponse, ErrorResponse, ValidationErrorResponse
from products_api.models.schemas.product import (
    Product,
    ProductCreate,
    ProductUpdate,
)
from products_api.validation.collector import ValidatedRequest, validated
from products_api.validation.rules import as_bool, as_number, as_text

router = APIRouter(prefix=API_PREFIX, tags=["Products"])

PRODUCT_DELETED = "Producto eliminado"

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Bad Request - invalid input data"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product Not Found"}}


async def _lookup(service: ProductService, product_id: int):
    product = await service.get_by_id(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


@router.get(
    "",
    response_model=DataResponse[List[Product]],
    summary="Get a list of products",
)
async def list_products(
    checked: ValidatedRequest = Depends(validated("GET", "/")),
    service: ProductService = Depends(get_product_service),
):
    """Return a list of products, newest first."""
    products = await service.list_all()
    return {"data": [Product.model_validate(product) for product in products]}


@router.get(
    "/{id}",
    response_model=DataResponse[Product],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product by ID",
    openapi_extra={"parameters": [id_parameter("The ID of the product to retrieve")]},
)
async def get_product(
    checked: ValidatedRequest = Depends(validated("GET", "/{id}")),
    service: ProductService = Depends(get_product_service),
):
    """Return a product based on its unique ID."""
    product = await _lookup(service, checked.id)
    return {"data": Product.model_validate(product)}


@router.post(
    "",
    response_model=DataResponse[Product],
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a new product",
    openapi_extra={"requestBody": json_body(ProductCreate)},
)
async def create_product(
    checked: ValidatedRequest = Depends(validated("POST", "/")),
    service: ProductService = Depends(get_product_service),
):
    """Create a new record in the database."""
    data = ProductCreate(
        name=as_text(checked.body["name"]),
        price=as_number(checked.body["price"]),
    )
    product = await service.create(data)
    return {"data": Product.model_validate(product)}


@router.put(
    "/{id}",
    response_model=DataResponse[Product],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a product with user input",
    openapi_extra={
        "parameters": [id_parameter("The ID of the product to update")],
        "requestBody": json_body(ProductUpdate),
    },
)
async def update_product(
    checked: ValidatedRequest = Depends(validated("PUT", "/{id}")),
    service: ProductService = Depends(get_product_service),
):
    """Overwrite name, price and status of an existing product."""
    product = await _lookup(service, checked.id)
    data = ProductUpdate(
        name=as_text(checked.body["name"]),
        price=as_number(checked.body["price"]),
        status=as_bool(checked.body["status"]),
    )
    product = await service.update(product, data)
    return {"data": Product.model_validate(product)}


@router.patch(
    "/{id}",
    response_model=DataResponse[Product],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update product status",
    openapi_extra={"parameters": [id_parameter("The ID of the product to toggle")]},
)
async def toggle_product_status(
    checked: ValidatedRequest = Depends(validated("PATCH", "/{id}")),
    service: ProductService = Depends(get_product_service),
):
    """Flip the availability status; the request body is not read."""
    product = await _lookup(service, checked.id)
    product = await service.toggle_status(product)
    return {"data": Product.model_validate(product)}


@router.delete(
    "/{id}",
    response_model=DataResponse[str],
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a product by a given ID",
    openapi_extra={"parameters": [id_parameter("The ID of the product to delete")]},
)
async def delete_product(
    checked: ValidatedRequest = Depends(validated("DELETE", "/{id}")),
    service: ProductService = Depends(get_product_service),
):
    """Delete a product and return a confirmation message."""
    product = await _lookup(service, checked.id)
    await service.delete(product)
    return {"data": PRODUCT_DELETED}
