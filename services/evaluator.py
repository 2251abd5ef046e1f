# services/evaluator.py
from typing import Optional, Sequence

from models.quiz import Score


def evaluate(quiz, submitted_answers: Sequence[Optional[str]]) -> Score:
    """Score submitted answers against a quiz's correct answers.

    Answers are matched by position with exact, case-sensitive string
    equality. Entries past the last question are ignored; a missing or
    null entry never matches.
    """
    total = len(quiz.questions)
    score = 0
    for i, question in enumerate(quiz.questions):
        if i < len(submitted_answers) and submitted_answers[i] == question.correctAnswer:
            score += 1
    return Score(score=score, total=total)
