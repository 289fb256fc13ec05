import logging
from datetime import datetime, timedelta
from typing import Optional

from examsys.core.config import AnswerPolicy, get_settings
from examsys.core.console import Console
from examsys.core.errors import AnswerIndexError, InputParseError
from examsys.schemas.exam import Exam, ExamType
from examsys.schemas.question import Question
from examsys.schemas.result import ExamResult, QuestionOutcome
from examsys.schemas.subject import Subject
from examsys.services.question_service import correct_answer_text, show_details

logger = logging.getLogger(__name__)

OUT_OF_RANGE_NOTICE = "Index out of range. Cannot add more questions."


def create_exam(
    exam_type: ExamType,
    duration_minutes: int,
    question_count: int,
    subject: Subject,
    now: Optional[datetime] = None,
) -> Exam:
    """Create an exam scheduled ``duration_minutes`` from now with empty question slots."""

    now = now or datetime.now()
    return Exam(
        exam_type=exam_type,
        scheduled_time=now + timedelta(minutes=duration_minutes),
        question_count=question_count,
        subject_id=subject.id,
    )


def add_question(exam: Exam, question: Question, index: int, console: Optional[Console] = None) -> bool:
    """Put ``question`` in slot ``index``. Out-of-range indices leave the exam untouched."""

    if not 0 <= index < exam.question_count:
        logger.warning("Rejected question %r at slot %s; exam has %s slots", question.header, index, exam.question_count)
        if console is not None:
            console.write(OUT_OF_RANGE_NOTICE)
        return False
    exam.questions[index] = question
    return True


def show_exam(exam: Exam, console: Console) -> None:
    """Write every populated question followed by its right answer."""

    console.write(f"{exam.label}:")
    for question in exam.populated_questions():
        show_details(question, console)
        console.write(f"Right Answer: {correct_answer_text(question)}")
        console.write()


def _read_choice(question: Question, console: Console, policy: AnswerPolicy) -> Optional[int]:
    """Read a 1-based choice and return it zero-based, or None when the policy scores it wrong."""

    try:
        index = console.read_int("Your answer: ") - 1
    except InputParseError:
        if policy == AnswerPolicy.abort:
            raise
        logger.warning("Unparsable answer for %r counted as wrong", question.header)
        return None

    if not 0 <= index < len(question.answers):
        if policy == AnswerPolicy.abort:
            raise AnswerIndexError(f"Answer {index + 1} is out of range (1-{len(question.answers)})")
        logger.warning("Answer %s for %r is out of range; counted as wrong", index + 1, question.header)
    return index


def take_exam(exam: Exam, console: Console, policy: Optional[AnswerPolicy] = None) -> ExamResult:
    """Run the scoring pass over every populated question and report the total.

    Final and Practical exams share this loop; only the heading differs.
    """

    policy = policy or get_settings().invalid_answer_policy
    console.write(f"Take the {exam.label}:")
    score = 0
    outcomes = []

    for question in exam.populated_questions():
        show_details(question, console)
        selected = _read_choice(question, console, policy)
        correct = selected is not None and selected == question.correct_index

        if correct:
            console.write("Correct!")
            score += question.mark
        else:
            console.write(f"Wrong! The correct answer is: {correct_answer_text(question)}")
        console.write()

        outcomes.append(
            QuestionOutcome(
                header=question.header,
                selected_index=selected,
                correct_index=question.correct_index,
                correct=correct,
                awarded=question.mark if correct else 0,
            )
        )

    console.write(f"Your total score: {score}")
    logger.info("%s finished with %s/%s", exam.label, score, exam.total_marks)
    return ExamResult(exam_type=exam.exam_type, score=score, max_score=exam.total_marks, outcomes=outcomes)
