from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from everfit_app.platform.constants import WELCOME_MESSAGE

welcome_router = APIRouter(tags=["welcome"])


@welcome_router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
