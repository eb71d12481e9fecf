from pydantic import BaseModel, ConfigDict, Field


class UserProgress(BaseModel):
    """Saved progress; aliases are the field names of the stored snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    best_quiz_score: int = Field(0, alias="quizScore")
    completed_tests: int = Field(0, alias="completedTests")
    budget_plans: int = Field(0, alias="budgetPlans")
