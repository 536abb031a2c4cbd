# services/product.py
from typing import Optional, List
from sqlalchemy import asc, desc

from products_api.models.database_models import ID_MAX, ID_MIN, Product
from products_api.models.schemas.product import ProductCreate, ProductUpdate
from products_api.utils.logging import get_logger

from products_api.services.base import BaseService

logger = get_logger(__name__)


class ProductService(BaseService[Product]):
    async def list_all(self, descending: bool = True) -> List[Product]:
        """All products ordered by id (newest first by default)"""
        order = desc(Product.id) if descending else asc(Product.id)
        return self.db.query(Product).order_by(order).all()

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        if not ID_MIN <= product_id <= ID_MAX:
            return None
        return self.db.get(Product, product_id)

    async def create(self, data: ProductCreate) -> Product:
        product = Product(name=data.name, price=data.price, status=True)

        def _add():
            self.db.add(product)
            return product

        await self._handle_db_operation(_add)
        self.db.refresh(product)
        logger.info("Created product {}", product.id)
        return product

    async def update(self, product: Product, data: ProductUpdate) -> Product:
        """Full overwrite of name, price and status"""
        for field, value in data.model_dump().items():
            setattr(product, field, value)
        return await self.save(product)

    async def toggle_status(self, product: Product) -> Product:
        product.status = not product.status
        return await self.save(product)

    async def save(self, product: Product) -> Product:
        await self._handle_db_operation(lambda: self.db.add(product))
        self.db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        await self._handle_db_operation(lambda: self.db.delete(product))
        logger.info("Deleted product {}", product.id)
