# File: storefront/schemas/product.py

import math
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field

# Largest integer a JSON client can round-trip exactly; also keeps ints well
# inside what the store's float columns hold.
MAX_SAFE_INTEGER = 2**53 - 1


def check_number(value):
    """
    Accept JSON numbers only: no numeric strings, no booleans, no
    inf/NaN, and no integers past ``MAX_SAFE_INTEGER``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("must be a finite number")
    if isinstance(value, int) and abs(value) > MAX_SAFE_INTEGER:
        raise ValueError("is out of range")
    return value


def whole_as_int(value):
    # Stored as float; 3500.0 goes back out as 3500.
    if isinstance(value, float) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value


Number = Annotated[Union[int, float], BeforeValidator(check_number)]
StoredNumber = Annotated[Union[int, float], BeforeValidator(whole_as_int)]


# -----------------------------
# Request bodies
# -----------------------------

class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    price: Number
    quantity: Number
    image: str = Field(min_length=1)


class ProductUpdate(BaseModel):
    """
    Partial update. Only fields present in the body are applied, and they
    are checked exactly like on create.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Number] = None
    quantity: Optional[Number] = None
    image: Optional[str] = Field(default=None, min_length=1)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


# -----------------------------
# Responses
# -----------------------------

class ProductRead(BaseModel):
    id: str
    name: str
    price: StoredNumber
    quantity: StoredNumber
    image: str

    class Config:
        from_attributes = True


class ProductResponse(BaseModel):
    product: ProductRead


class ProductListResponse(BaseModel):
    total: int
    all_products: List[ProductRead] = Field(alias="allProducts")

    class Config:
        populate_by_name = True


class NewProductResponse(BaseModel):
    new_product: ProductRead = Field(alias="newProduct")

    class Config:
        populate_by_name = True


class UpdatedProductResponse(BaseModel):
    updated_product: ProductRead = Field(alias="updatedProduct")

    class Config:
        populate_by_name = True
