# services/quiz_store.py
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from errors import NotFoundError
from models.quiz import Quiz
from services.owners import populate_owners
from services.quiz_builder import QuizBuilder

logger = logging.getLogger(__name__)


async def create_quiz(db, title: str, questions, owner_id: Optional[str] = None) -> Quiz:
    """Validate and store a quiz in one submission.

    Raises ValidationError when the title is blank or a question is
    incomplete (see QuizBuilder.build).
    """
    definition = QuizBuilder.from_payload(title, questions).build()

    quiz_dict = definition.model_dump()
    quiz_dict["id"] = str(uuid.uuid4())
    quiz_dict["owner"] = owner_id
    quiz_dict["createdAt"] = datetime.now(timezone.utc).isoformat()

    await db.quizzes.insert_one(quiz_dict)
    quiz_dict.pop("_id", None)
    logger.info(f"Created quiz {quiz_dict['id']} with {len(definition.questions)} questions, owner={owner_id}")

    await populate_owners(db, [quiz_dict])
    return Quiz(**quiz_dict)


async def get_quiz(db, quiz_id: str) -> Quiz:
    quiz = await db.quizzes.find_one({"id": quiz_id}, {"_id": 0})
    if not quiz:
        logger.warning(f"Quiz not found: {quiz_id}")
        raise NotFoundError("Quiz not found")
    await populate_owners(db, [quiz])
    return Quiz(**quiz)


async def list_quizzes(db) -> List[Quiz]:
    quizzes = await db.quizzes.find({}, {"_id": 0}).to_list(None)
    await populate_owners(db, quizzes)
    return [Quiz(**q) for q in quizzes]
