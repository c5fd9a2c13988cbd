from fastapi import APIRouter

from crossframe.api import __version__, list_fold_modes

router = APIRouter()


@router.get("/ping")
def ping():
    """Liveness plus what this server can run."""
    return {"ok": True, "version": __version__, "fold_modes": list_fold_modes()}
