from fastapi import APIRouter

from storefront.api.routes_products import router as products_router
from storefront.api.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(users_router)
api_router.include_router(products_router)
