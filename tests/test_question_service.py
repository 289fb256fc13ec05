import pytest
from pydantic import ValidationError

from examsys.core.console import ScriptedConsole
from examsys.core.errors import AnswerIndexError
from examsys.schemas.question import Answer, Question, QuestionType
from examsys.services.question_service import correct_answer_text, show_details, sort_questions


def _mcq(texts, correct=None, header="Q2", mark=10):
    question = Question.multiple_choice(header, "Pick one", mark, len(texts))
    for index, text in enumerate(texts):
        if text is not None:
            question.set_answer(index, text)
    if correct is not None:
        question.set_correct_answer(correct)
    return question


def test_true_false_has_fixed_answers():
    question = Question.true_false("Q1", "Is 2+2=4?", 5)
    assert [answer.text for answer in question.answers] == ["True", "False"]
    assert [answer.id for answer in question.answers] == [1, 2]


def test_true_false_rejects_other_answers():
    with pytest.raises(ValidationError):
        Question(
            question_type=QuestionType.true_false,
            header="Q1",
            body="Is 2+2=4?",
            mark=5,
            answers=[Answer(id=1, text="Yes"), Answer(id=2, text="No")],
        )
    question = Question.true_false("Q1", "Is 2+2=4?", 5)
    with pytest.raises(ValueError):
        question.set_answer(0, "Yes")


def test_show_details_true_false():
    console = ScriptedConsole()
    show_details(Question.true_false("Q1", "Is 2+2=4?", 5), console)
    assert console.lines == ["True/False Question: Q1", "Is 2+2=4?", "1: True", "2: False"]


def test_show_details_skips_empty_slots():
    console = ScriptedConsole()
    show_details(_mcq(["A", None, "C"]), console)
    assert console.lines == ["MCQ Question: Q2", "Pick one", "1: A", "3: C"]


def test_set_correct_answer_bounds():
    question = _mcq(["A", None, "C"])
    with pytest.raises(AnswerIndexError):
        question.set_correct_answer(3)
    with pytest.raises(AnswerIndexError):
        question.set_correct_answer(-1)
    with pytest.raises(AnswerIndexError):
        question.set_correct_answer(1)
    assert question.set_correct_answer(2).text == "C"
    assert question.correct_index == 2


def test_identical_answer_texts_stay_separate():
    question = _mcq(["Same", "Same"], correct=1)
    assert question.correct_index == 1
    assert question.correct_answer.id == 2


def test_correct_answer_text_without_designation():
    assert correct_answer_text(_mcq(["A"])) == "N/A"
    assert correct_answer_text(_mcq(["A", "B"], correct=1)) == "B"


def test_sort_is_ordinal_by_header():
    questions = [_mcq(["x"], header=h) for h in ("beta", "Beta", "alpha", "Zeta")]
    assert [q.header for q in sort_questions(questions)] == ["Beta", "Zeta", "alpha", "beta"]


def test_str_joins_header_and_body():
    assert str(Question.true_false("Q1", "Is 2+2=4?", 5)) == "Q1 - Is 2+2=4?"
