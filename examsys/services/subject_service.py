import logging

from examsys.schemas.exam import Exam
from examsys.schemas.subject import Subject

logger = logging.getLogger(__name__)


def create_subject(subject_id: int, name: str) -> Subject:
    return Subject(id=subject_id, name=name)


def create_exam(subject: Subject, exam: Exam) -> Subject:
    """Attach ``exam`` to the subject, replacing any exam it already owns."""

    if subject.exam is not None and subject.exam is not exam:
        logger.info("Replacing %s for subject %s", subject.exam.label, subject.id)
    subject.exam = exam
    return subject
