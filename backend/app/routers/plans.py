from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse

from crossframe.api import CrossFrameError

from ..exceptions import PlanCacheGoneError
from ..services.plan_persistence_service import load_plan_service, save_plan_service

router = APIRouter()


@router.get("/plans/{plan_uid}/download", response_class=StreamingResponse, summary="Download a cached treatment plan")
def download_plan(plan_uid: str):
    """Returns the joblib plan payload as an attachment."""
    try:
        payload_bytes, info = save_plan_service(plan_uid)
    except PlanCacheGoneError as e:
        raise HTTPException(status_code=404, detail=str(e))

    headers = {
        "Content-Disposition": f'attachment; filename="{plan_uid}.plan.joblib"',
        "X-CROSSFRAME-SHA256": info["sha256"],
        "X-CROSSFRAME-Size": str(info["size"]),
    }
    return StreamingResponse(
        content=iter([payload_bytes]),
        media_type="application/octet-stream",
        headers=headers,
    )


@router.post("/plans/load", summary="Load a treatment plan from raw payload bytes")
async def load_plan(request: Request):
    """Accepts a plan payload as the request body and caches it under its uid."""
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Empty payload")
    try:
        return load_plan_service(data)
    except CrossFrameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Unreadable plan payload: {type(e).__name__}: {e}")
