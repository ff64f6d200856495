from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    """Liveness probe payload."""

    status: str = Field("ok", description="Always 'ok' while the API is serving")
    version: str = Field(..., description="Application version")
