from fastapi import APIRouter

from laptop_api.api.v1.endpoints import laptops

api_router = APIRouter()
api_router.include_router(laptops.router, prefix="/laptops", tags=["laptops"])
