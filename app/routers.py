from fastapi import APIRouter, FastAPI
from app.endpoints import app_view, customer

router = APIRouter()

router.include_router(customer.router)
router.include_router(app_view.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
