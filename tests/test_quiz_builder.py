import pytest

from errors import ValidationError
from models.quiz import QuestionIn
from services.quiz_builder import QuizBuilder


def test_build_from_indexed_edits() -> None:
    builder = QuizBuilder("Capitals")
    q = builder.add_question()
    builder.set_prompt(q, "Capital of France?")
    builder.add_option(q, "Lyon")
    builder.add_option(q, "Paris")
    builder.set_correct_answer(q, "Paris")

    quiz = builder.build()

    assert quiz.title == "Capitals"
    assert len(quiz.questions) == 1
    assert quiz.questions[0].question == "Capital of France?"
    assert quiz.questions[0].options == ["Lyon", "Paris"]
    assert quiz.questions[0].correctAnswer == "Paris"


def test_edit_and_remove_by_index() -> None:
    builder = QuizBuilder("Quiz")
    builder.add_question("first", ["a", "b"], "a")
    second = builder.add_question("second", ["c", "d", "e"], "c")
    builder.remove_option(second, 2)
    builder.set_option(second, 0, "cc")
    builder.set_correct_answer(second, "cc")
    builder.remove_question(0)

    assert len(builder) == 1
    assert builder.question(0).prompt == "second"
    assert builder.build().questions[0].options == ["cc", "d"]


def test_out_of_range_index_raises() -> None:
    builder = QuizBuilder("Quiz")
    with pytest.raises(IndexError):
        builder.set_prompt(0, "nothing here")


def test_build_reports_every_problem() -> None:
    builder = QuizBuilder("   ")
    builder.add_question("", ["only one"], "")
    builder.add_question("ok?", ["yes", ""], "maybe")

    with pytest.raises(ValidationError) as exc_info:
        builder.build()

    locations = {err["loc"] for err in exc_info.value.errors}
    assert locations == {
        "title",
        "questions.0.question",
        "questions.0.options",
        "questions.0.correctAnswer",
        "questions.1.options.1",
        "questions.1.correctAnswer",
    }


def test_correct_answer_must_be_an_option() -> None:
    builder = QuizBuilder("Quiz")
    builder.add_question("2+2?", ["3", "4"], "5")

    with pytest.raises(ValidationError) as exc_info:
        builder.build()

    assert exc_info.value.errors == [
        {"loc": "questions.0.correctAnswer", "msg": "Correct answer must be one of the options"}
    ]


def test_quiz_without_questions_is_valid() -> None:
    assert QuizBuilder("Empty").build().questions == []


def test_from_payload() -> None:
    builder = QuizBuilder.from_payload(
        "  Math  ",
        [QuestionIn(question="2+2?", options=["3", "4"], correctAnswer="4")],
    )
    quiz = builder.build()
    assert quiz.title == "Math"
    assert quiz.questions[0].correctAnswer == "4"


def test_build_trims_prompts_but_keeps_options_verbatim() -> None:
    builder = QuizBuilder("Quiz")
    builder.add_question("  Capital of France?  ", [" Paris", "Lyon"], " Paris")

    question = builder.build().questions[0]

    assert question.question == "Capital of France?"
    assert question.options == [" Paris", "Lyon"]
    assert question.correctAnswer == " Paris"
