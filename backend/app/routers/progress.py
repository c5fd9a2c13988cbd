from fastapi import APIRouter, HTTPException

from ..progress.registry import PROGRESS, FoldProgressRecord

router = APIRouter(prefix="/progress")


@router.get("/{progress_id}", response_model=FoldProgressRecord)
def get_fold_progress(progress_id: str) -> FoldProgressRecord:
    rec = PROGRESS.get(progress_id)
    if rec is None:
        raise HTTPException(status_code=404, detail=f"No cross-frame run is reporting as {progress_id!r}")
    return rec
