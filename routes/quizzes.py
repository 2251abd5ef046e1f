# routes/quizzes.py
from fastapi import APIRouter, Depends
from typing import List, Optional
import logging

from database import get_db
from models.quiz import EvaluationRequest, Quiz, QuizCreate, Score
from services import quiz_store
from services.evaluator import evaluate
from .auth import get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.post("", response_model=Quiz, status_code=201)
async def create_quiz(
    quiz: QuizCreate,
    db=Depends(get_db),
    current_user: Optional[dict] = Depends(get_optional_user),
):
    owner_id = current_user["id"] if current_user else None
    logger.info(f"Creating quiz '{quiz.title}' for owner={owner_id}")
    return await quiz_store.create_quiz(db, quiz.title, quiz.questions, owner_id)


@router.get("", response_model=List[Quiz])
async def get_quizzes(db=Depends(get_db)):
    return await quiz_store.list_quizzes(db)


@router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(quiz_id: str, db=Depends(get_db)):
    return await quiz_store.get_quiz(db, quiz_id)


@router.post("/{quiz_id}/evaluate", response_model=Score)
async def evaluate_quiz(quiz_id: str, submission: EvaluationRequest, db=Depends(get_db)):
    quiz = await quiz_store.get_quiz(db, quiz_id)
    result = evaluate(quiz, submission.answers)
    logger.info(f"Evaluated quiz {quiz_id}: {result.score}/{result.total}")
    return result
