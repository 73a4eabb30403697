# File: storefront/models/product.py

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, IdMixin


class Product(IdMixin, Base):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)

    # URL or path of the product picture
    image: Mapped[str] = mapped_column(Text, nullable=False)
