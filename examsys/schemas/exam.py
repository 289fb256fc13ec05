from datetime import datetime
from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field, model_validator

from examsys.core.errors import InvalidExamTypeError
from examsys.schemas.question import Question


class ExamType(str, Enum):
    final = "final"
    practical = "practical"

    @property
    def label(self) -> str:
        return _EXAM_LABELS[self]

    @property
    def selector(self) -> int:
        return _EXAM_SELECTORS[self]

    @classmethod
    def from_selector(cls, selector: int) -> "ExamType":
        """Map the console selector (1 or 2) to an exam type."""

        for exam_type, value in _EXAM_SELECTORS.items():
            if value == selector:
                return exam_type
        raise InvalidExamTypeError("Invalid exam type")


_EXAM_LABELS = {ExamType.final: "Final Exam", ExamType.practical: "Practical Exam"}
_EXAM_SELECTORS = {ExamType.final: 1, ExamType.practical: 2}


class Exam(BaseModel):
    """An exam with a fixed number of question slots.

    The owning subject is referenced by id only; the subject holds the exam.
    """

    exam_type: ExamType
    scheduled_time: datetime
    question_count: int = Field(..., ge=0)
    subject_id: int
    questions: List[Optional[Question]] = Field(default_factory=list)

    @model_validator(mode="after")
    def allocate_slots(self) -> "Exam":
        if not self.questions:
            self.questions = [None] * self.question_count
        elif len(self.questions) != self.question_count:
            raise ValueError(
                f"exam has {len(self.questions)} question slots but question_count is {self.question_count}"
            )
        return self

    @property
    def label(self) -> str:
        return self.exam_type.label

    @property
    def total_marks(self) -> int:
        return sum(question.mark for question in self.populated_questions())

    def populated_questions(self) -> Iterator[Question]:
        for question in self.questions:
            if question is not None:
                yield question
