from fastapi import Depends
from sqlalchemy.orm import Session

from products_api.database.database import get_db
from products_api.services.product import ProductService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
