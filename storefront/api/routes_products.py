# File: storefront/api/routes_products.py

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_product_store
from storefront.core.exceptions import NotFoundError
from storefront.schemas.product import (
    NewProductResponse,
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    UpdatedProductResponse,
)
from storefront.schemas.user import MessageResponse
from storefront.services.product_store import ProductStore

router = APIRouter(tags=["products"])


@router.get("/products", response_model=ProductListResponse, summary="List products")
def list_products(store: ProductStore = Depends(get_product_store)):
    products = store.find_all()
    if not products:
        raise NotFoundError("No Products found")
    return {"total": len(products), "allProducts": products}


@router.get("/product/{product_id}", response_model=ProductResponse, summary="Get a product")
def get_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    product = store.find_one(product_id)
    if product is None:
        raise NotFoundError("Product does not exist")
    return {"product": product}


@router.post(
    "/product",
    response_model=NewProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
def create_product(payload: ProductCreate, store: ProductStore = Depends(get_product_store)):
    return {"newProduct": store.create(payload)}


@router.put("/product/{product_id}", response_model=UpdatedProductResponse, summary="Update a product")
def update_product(
    product_id: str,
    payload: ProductUpdate,
    store: ProductStore = Depends(get_product_store),
):
    """
    Apply the fields present in the body; absent fields keep their value.
    """
    product = store.update(product_id, payload.changes())
    if product is None:
        raise NotFoundError("Product does not exist..")
    return {"updatedProduct": product}


@router.delete("/product/{product_id}", response_model=MessageResponse, summary="Delete a product")
def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    if not store.remove(product_id):
        raise NotFoundError(f"No Product with ID {product_id}")
    return {"msg": "Product deleted.."}
