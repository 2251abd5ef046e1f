# services/quiz_builder.py
from typing import List, Optional

from errors import ValidationError
from models.quiz import Question, QuizDefinition

MIN_OPTIONS = 2


class QuestionDraft:
    def __init__(self, prompt: str = "", options: Optional[List[str]] = None, correct_answer: str = ""):
        self.prompt = prompt
        self.options = list(options) if options else []
        self.correct_answer = correct_answer

    def __repr__(self) -> str:
        return f"QuestionDraft({self.prompt!r}, {self.options!r}, {self.correct_answer!r})"


class QuizBuilder:
    """Mutable quiz under construction.

    Questions and their options are edited by index; nothing is checked
    until `build()`, which reports every problem at once.
    """

    def __init__(self, title: str = ""):
        self.title = title
        self._questions: List[QuestionDraft] = []

    @classmethod
    def from_payload(cls, title: str, questions) -> "QuizBuilder":
        builder = cls(title)
        for q in questions:
            builder.add_question(q.question, q.options, q.correctAnswer)
        return builder

    def __len__(self) -> int:
        return len(self._questions)

    def question(self, index: int) -> QuestionDraft:
        return self._questions[index]

    def add_question(self, prompt: str = "", options: Optional[List[str]] = None, correct_answer: str = "") -> int:
        self._questions.append(QuestionDraft(prompt, options, correct_answer))
        return len(self._questions) - 1

    def remove_question(self, index: int) -> None:
        del self._questions[index]

    def set_prompt(self, index: int, text: str) -> None:
        self._questions[index].prompt = text

    def add_option(self, index: int, text: str = "") -> int:
        options = self._questions[index].options
        options.append(text)
        return len(options) - 1

    def set_option(self, index: int, option_index: int, text: str) -> None:
        self._questions[index].options[option_index] = text

    def remove_option(self, index: int, option_index: int) -> None:
        del self._questions[index].options[option_index]

    def set_correct_answer(self, index: int, value: str) -> None:
        self._questions[index].correct_answer = value

    def errors(self) -> List[dict]:
        problems = []
        if not self.title.strip():
            problems.append({"loc": "title", "msg": "Title is required"})

        for i, draft in enumerate(self._questions):
            if not draft.prompt.strip():
                problems.append({"loc": f"questions.{i}.question", "msg": "Question text is required"})
            if len(draft.options) < MIN_OPTIONS:
                problems.append({"loc": f"questions.{i}.options", "msg": f"At least {MIN_OPTIONS} options are required"})
            for j, option in enumerate(draft.options):
                if not option.strip():
                    problems.append({"loc": f"questions.{i}.options.{j}", "msg": "Option must not be empty"})
            if not draft.correct_answer:
                problems.append({"loc": f"questions.{i}.correctAnswer", "msg": "Correct answer is required"})
            elif draft.correct_answer not in draft.options:
                problems.append({"loc": f"questions.{i}.correctAnswer", "msg": "Correct answer must be one of the options"})
        return problems

    def build(self) -> QuizDefinition:
        """Validate the draft and return the finished quiz.

        The title and question prompts are trimmed. Options and the correct
        answer are kept verbatim; scoring compares against them exactly.
        """
        problems = self.errors()
        if problems:
            raise ValidationError("Invalid quiz", problems)
        return QuizDefinition(
            title=self.title.strip(),
            questions=[
                Question(question=d.prompt.strip(), options=list(d.options), correctAnswer=d.correct_answer)
                for d in self._questions
            ],
        )
