from fastapi import APIRouter, HTTPException

from crossframe.api import CrossFrameError

from ..models.v1.crossframe_models import CrossFrameRequest, CrossFrameResponse
from ..services.crossframe_service import run_cross_frame

router = APIRouter()


@router.post("/crossframe", response_model=CrossFrameResponse)
def crossframe_endpoint(req: CrossFrameRequest):
    """Build a cross frame from inline records and cache the full-data plan.

    The returned ``summary.plan_uid`` can be passed to /treatments/apply.
    """
    try:
        result = run_cross_frame(req.records, req.config, progress_id=req.progress_id)
        return CrossFrameResponse(**result)
    except (CrossFrameError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
