"""
Root information endpoint.

``GET /`` answers with the project name and version so a deployment
can be probed without touching the database.
"""

from typing import Dict

from fastapi import APIRouter

from blog_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {
        "api": "up",
        "name": settings.project_name,
        "version": settings.api_version,
    }
