# models/quiz.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class QuestionIn(BaseModel):
    question: str = ""
    options: List[str] = []
    correctAnswer: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"question": "2+2?", "options": ["3", "4"], "correctAnswer": "4"}
        }
    )


class QuizCreate(BaseModel):
    title: str = ""
    questions: List[QuestionIn] = []


class Question(BaseModel):
    question: str
    options: List[str]
    correctAnswer: str


class QuizDefinition(BaseModel):
    """A validated quiz ready to be stored."""
    title: str
    questions: List[Question]


class OwnerRef(BaseModel):
    id: str
    username: str


class Quiz(BaseModel):
    id: str
    title: str
    questions: List[Question]
    owner: Optional[OwnerRef] = None
    createdAt: str


class EvaluationRequest(BaseModel):
    answers: List[Optional[str]] = []


class Score(BaseModel):
    score: int
    total: int
