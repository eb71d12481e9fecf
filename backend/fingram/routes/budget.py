"""Routes for the budget calculator."""

from fastapi import APIRouter, Depends

from fingram.budget import build_report
from fingram.schemas import BudgetData, BudgetReport, BudgetUpdate
from fingram.workspace import Workspace, get_workspace

router = APIRouter(prefix="/budget", tags=["budget"])


@router.get("/", response_model=BudgetReport)
async def read_budget(workspace: Workspace = Depends(get_workspace)):
    return build_report(workspace.budget)


@router.patch("/", response_model=BudgetReport)
async def update_budget(
    data: BudgetUpdate,
    workspace: Workspace = Depends(get_workspace),
):
    """Apply edited form fields; fields that were not sent keep their value."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "income":
            workspace.budget.income = value
        else:
            setattr(workspace.budget.expenses, field, value)
    return build_report(workspace.budget)


@router.post("/summary", response_model=BudgetReport)
async def summarize_budget(data: BudgetData):
    """Evaluate a complete budget without touching the stored form."""
    return build_report(data)
