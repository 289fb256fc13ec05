import logging
from datetime import datetime
from typing import Optional

from examsys.core.config import Settings, get_settings
from examsys.core.console import Console
from examsys.schemas.exam import Exam, ExamType
from examsys.schemas.question import Question, QuestionType
from examsys.schemas.result import SessionResult
from examsys.schemas.subject import Subject
from examsys.services import exam_service, subject_service

logger = logging.getLogger(__name__)

_QUESTION_SELECTORS = {1: QuestionType.true_false, 2: QuestionType.multiple_choice}


def input_subject(console: Console) -> Subject:
    subject_id = console.read_int("Enter Subject ID: ")
    name = console.read("Enter Subject Name: ")
    return subject_service.create_subject(subject_id, name)


def choose_exam_type(console: Console, subject: Subject, now: Optional[datetime] = None) -> Exam:
    """Collect exam type, duration and question count, then build the exam.

    All three values are read before the type selector is checked.
    """

    selector = console.read_int("Choose Exam Type (1 for Final Exam, 2 for Practical Exam): ")
    duration = console.read_int("Enter Exam Time (in minutes): ")
    question_count = console.read_int("Enter Number of Questions for the Exam: ")
    exam_type = ExamType.from_selector(selector)
    return exam_service.create_exam(exam_type, duration, question_count, subject, now=now)


def input_question(console: Console) -> Optional[Question]:
    """Collect one question. An unknown type selector yields None and leaves the slot empty."""

    selector = console.read_int("Enter Question Type (1 for True/False, 2 for MCQ): ")
    header = console.read("Enter Question Header: ")
    body = console.read("Enter Question Body: ")
    mark = console.read_int("Enter Question Mark: ")

    question_type = _QUESTION_SELECTORS.get(selector)
    if question_type is None:
        logger.warning("Unknown question type %s for %r; slot left empty", selector, header)
        return None

    if question_type == QuestionType.true_false:
        question = Question.true_false(header, body, mark)
        question.set_correct_answer(console.read_int("Enter the correct answer (1 for True, 2 for False): ") - 1)
        return question

    answer_count = console.read_int("Enter number of possible answers: ")
    question = Question.multiple_choice(header, body, mark, answer_count)
    for index in range(answer_count):
        question.set_answer(index, console.read(f"Enter Answer {index + 1} Text: "))
    question.set_correct_answer(console.read_int("Enter the correct answer index: ") - 1)
    return question


def run_session(console: Console, settings: Optional[Settings] = None, now: Optional[datetime] = None) -> SessionResult:
    """Build a subject and exam from console input, show it, then score it."""

    settings = settings or get_settings()
    subject = input_subject(console)
    exam = choose_exam_type(console, subject, now=now)
    logger.debug("Collecting %s questions for %s", exam.question_count, exam.label)

    for index in range(exam.question_count):
        question = input_question(console)
        if question is not None:
            exam_service.add_question(exam, question, index, console)

    subject_service.create_exam(subject, exam)
    exam_service.show_exam(exam, console)
    result = exam_service.take_exam(exam, console, policy=settings.invalid_answer_policy)
    return SessionResult(subject=subject, result=result)
