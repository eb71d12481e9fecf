from fastapi import APIRouter, Depends

from fingram.schemas import UserProgress
from fingram.workspace import Workspace, get_workspace

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/", response_model=UserProgress, response_model_by_alias=False)
async def read_progress(workspace: Workspace = Depends(get_workspace)):
    """Best quiz score and activity counters, as last committed."""
    return workspace.progress
