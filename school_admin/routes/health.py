from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.VERSION}
