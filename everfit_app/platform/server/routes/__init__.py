from fastapi import APIRouter

from everfit_app.platform.server.routes.base import base_router
from everfit_app.platform.server.routes.welcome import welcome_router

root = APIRouter()
root.include_router(welcome_router)
root.include_router(base_router)
