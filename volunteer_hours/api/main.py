from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .routers import awards, hours
from .schemas import HealthStatus


app = FastAPI(title="Volunteer Hours API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create shared API v1 router
api_v1 = APIRouter(prefix="/api/v1")


@api_v1.get("/health")
async def health_check() -> HealthStatus:
    """Return health status of the API."""
    return HealthStatus(status="healthy", version=__version__)


api_v1.include_router(hours.router)
api_v1.include_router(awards.router)

app.include_router(api_v1)
