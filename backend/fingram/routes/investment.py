"""Routes for the investment growth calculator."""

from fastapi import APIRouter, Depends

from fingram.investment import build_report
from fingram.schemas import InvestmentInputs, InvestmentUpdate, ProjectionReport
from fingram.workspace import Workspace, get_workspace

router = APIRouter(prefix="/investment", tags=["investment"])


@router.get("/", response_model=ProjectionReport)
async def read_investment(workspace: Workspace = Depends(get_workspace)):
    return build_report(workspace.investment)


@router.patch("/", response_model=ProjectionReport)
async def update_investment(
    data: InvestmentUpdate,
    workspace: Workspace = Depends(get_workspace),
):
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(workspace.investment, field, value)
    return build_report(workspace.investment)


@router.post("/projection", response_model=ProjectionReport)
async def project_investment(data: InvestmentInputs):
    return build_report(data)
