"""Health check routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ideamarket.config import Settings
from ideamarket.interface.api.pages import landing_page

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool = True


class TestEmailResponse(BaseModel):
    """Mailer liveness response."""

    ok: bool = True
    msg: str = "server up"


@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse()


@router.get("/api/test-email", response_model=TestEmailResponse)
async def test_email() -> TestEmailResponse:
    """Check the mailer is up without sending anything."""
    return TestEmailResponse()


@router.get("/", response_class=HTMLResponse)
async def root(settings: FromDishka[Settings]) -> HTMLResponse:
    """Landing page listing the diagnostic routes."""
    return HTMLResponse(landing_page(settings.api.base_url))
