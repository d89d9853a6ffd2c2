from fastapi import APIRouter
from .customers import router as customers_router
from .orders import router as orders_router
from .activities import router as activities_router
from .crop_cycles import router as crop_cycles_router
from .reminders import router as reminders_router
from .planning import router as planning_router
from .dashboard import router as dashboard_router

api_router = APIRouter()
api_router.include_router(customers_router)
api_router.include_router(orders_router)
api_router.include_router(activities_router)
api_router.include_router(crop_cycles_router)
api_router.include_router(reminders_router)
api_router.include_router(planning_router)
api_router.include_router(dashboard_router)
