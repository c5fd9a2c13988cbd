from fastapi import APIRouter, HTTPException

from crossframe.api import CrossFrameError

from ..exceptions import PlanCacheGoneError
from ..models.v1.crossframe_models import ApplyTreatmentsRequest, ApplyTreatmentsResponse
from ..services.crossframe_service import apply_cached_plan

router = APIRouter()


@router.post("/treatments/apply", response_model=ApplyTreatmentsResponse)
def apply_treatments_endpoint(req: ApplyTreatmentsRequest):
    """Apply a cached treatment plan to new records."""
    try:
        result = apply_cached_plan(req.plan_uid, req.records)
        return ApplyTreatmentsResponse(**result)
    except PlanCacheGoneError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (CrossFrameError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
