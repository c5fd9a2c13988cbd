from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from crossframe.contracts.results.crossframe import CrossFrameSummary, TreatedRecords
from crossframe.contracts.run_config import CrossFrameConfig


class CrossFrameRequest(BaseModel):
    records: List[Dict[str, Any]]
    config: CrossFrameConfig
    # Optional id for polling /api/v1/progress/{progress_id}
    progress_id: Optional[str] = None


class CrossFrameResponse(BaseModel):
    summary: CrossFrameSummary
    cross_frame: TreatedRecords


class ApplyTreatmentsRequest(BaseModel):
    plan_uid: str
    records: List[Dict[str, Any]] = Field(default_factory=list)


class ApplyTreatmentsResponse(BaseModel):
    plan_uid: str
    treated: TreatedRecords
