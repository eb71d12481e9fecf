"""Routes driving the financial literacy quiz.

Every endpoint answers with the full :class:`QuizView`. Actions the quiz
does not accept in its current state leave it unchanged; the ``can_start``
and ``can_answer`` flags tell the client which controls to enable.
"""

from fastapi import APIRouter, Depends

from fingram.content import RESULT_MESSAGES
from fingram.quiz import QuizEngine
from fingram.schemas import (
    AnswerSubmission,
    DifficultySelect,
    QuestionRead,
    QuizResultRead,
    QuizView,
    Reveal,
)
from fingram.workspace import Workspace, get_workspace

router = APIRouter(prefix="/quiz", tags=["quiz"])


def quiz_view(engine: QuizEngine) -> QuizView:
    total = len(engine.questions)
    question = engine.current_question
    progress_percent = 0.0
    if question is not None:
        progress_percent = (engine.current_index + 1) / total * 100
    view = QuizView(
        phase=engine.phase,
        difficulty=engine.difficulty,
        question_count=total,
        current_index=engine.current_index,
        progress_percent=progress_percent,
        score=engine.score,
        can_start=engine.can_start,
        can_answer=engine.can_answer,
    )
    if question is not None:
        view.question = QuestionRead(
            id=question.id, question=question.question, options=list(question.options)
        )
        if engine.selected_answer is not None:
            view.reveal = Reveal(
                selected=engine.selected_answer,
                correct=question.correct,
                is_correct=engine.selected_answer == question.correct,
                explanation=question.explanation,
            )
    result = engine.result()
    if result is not None:
        view.result = QuizResultRead(
            score=result.score,
            total=result.total,
            percent=result.percent,
            tier=result.tier,
            message=RESULT_MESSAGES[result.tier],
        )
    return view


@router.get("/", response_model=QuizView)
async def read_quiz(workspace: Workspace = Depends(get_workspace)):
    return quiz_view(workspace.quiz)


@router.put("/difficulty", response_model=QuizView)
async def select_difficulty(
    data: DifficultySelect,
    workspace: Workspace = Depends(get_workspace),
):
    workspace.quiz.select_difficulty(data.difficulty)
    return quiz_view(workspace.quiz)


@router.post("/start", response_model=QuizView)
async def start_quiz(workspace: Workspace = Depends(get_workspace)):
    workspace.quiz.start()
    return quiz_view(workspace.quiz)


@router.post("/answer", response_model=QuizView)
async def answer_question(
    data: AnswerSubmission,
    workspace: Workspace = Depends(get_workspace),
):
    """Record an answer; the quiz moves on by itself after the reveal delay."""
    workspace.quiz.answer(data.option)
    return quiz_view(workspace.quiz)


@router.post("/reset", response_model=QuizView)
async def reset_quiz(workspace: Workspace = Depends(get_workspace)):
    workspace.quiz.reset()
    return quiz_view(workspace.quiz)
