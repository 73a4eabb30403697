# File: storefront/services/product_store.py

import logging
from typing import List, Optional

from sqlalchemy import select

from storefront.models.product import Product
from storefront.schemas.product import ProductCreate
from storefront.services.base_store import BaseStore

logger = logging.getLogger(__name__)


class ProductStore(BaseStore):
    def find_all(self) -> List[Product]:
        with self._guard("fetching products"):
            return list(self.db.scalars(select(Product)))

    def find_one(self, product_id: str) -> Optional[Product]:
        with self._guard("fetching the product"):
            return self.db.get(Product, product_id)

    def create(self, data: ProductCreate) -> Product:
        product = Product(**data.model_dump())
        with self._guard("creating the product"):
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        logger.info("Product %s created", product.id)
        return product

    def update(self, product_id: str, changes: dict) -> Optional[Product]:
        with self._guard("updating the product"):
            product = self.db.get(Product, product_id)
            if product is None:
                return None
            for field, value in changes.items():
                setattr(product, field, value)
            self.db.commit()
            self.db.refresh(product)
        logger.info("Product %s updated (%s)", product_id, ", ".join(changes) or "no changes")
        return product

    def remove(self, product_id: str) -> bool:
        with self._guard("deleting the product"):
            product = self.db.get(Product, product_id)
            if product is None:
                return False
            self.db.delete(product)
            self.db.commit()
        logger.info("Product %s deleted", product_id)
        return True
