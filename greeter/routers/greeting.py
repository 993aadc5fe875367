# greeter/routers/greeting.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from greeter.settings import ServerSettings

router = APIRouter(tags=["greeting"])


def get_settings(request: Request) -> ServerSettings:
    """Settings the running app was built with."""
    return request.app.state.settings


@router.get("/", response_class=PlainTextResponse, summary="Fixed greeting")
async def read_greeting(settings: ServerSettings = Depends(get_settings)):
    return settings.greeting
