"""
Liveness and version endpoints, served outside the ``/api/v1`` prefix.
"""

from fastapi import APIRouter

from bookcase import __version__

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report that the server is up and accepting requests.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Report the server package version and the API version it serves.",
)
async def version():
    return {"version": __version__, "api_version": "v1"}
