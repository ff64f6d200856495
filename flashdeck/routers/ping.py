from fastapi import APIRouter

from flashdeck.config import get_settings
from flashdeck.schemas.api.health import PingResponse

router = APIRouter(tags=["health"])


@router.get("/ping", response_model=PingResponse)
def ping():
    """Liveness probe."""
    return PingResponse(version=get_settings().app_version)
