from fastapi import APIRouter

from aina_api.routers.v1 import (
    geographic_names,
    metrics,
    shoreline,
    soil,
    stream_gauge,
    tsunami,
)

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(geographic_names.router)
v1_router.include_router(shoreline.router)
v1_router.include_router(soil.router)
v1_router.include_router(tsunami.router)
v1_router.include_router(metrics.router)
v1_router.include_router(stream_gauge.router)
