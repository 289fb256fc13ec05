from typing import List, Optional

from pydantic import BaseModel, Field

from examsys.schemas.exam import ExamType
from examsys.schemas.subject import Subject


class QuestionOutcome(BaseModel):
    """How one question went during a scoring pass."""

    header: str
    selected_index: Optional[int] = Field(default=None, description="Zero-based slot chosen, None if unparsable")
    correct_index: Optional[int] = None
    correct: bool
    awarded: int = 0


class ExamResult(BaseModel):
    """Cumulative outcome of a scoring pass."""

    exam_type: ExamType
    score: int
    max_score: int
    outcomes: List[QuestionOutcome] = Field(default_factory=list)


class SessionResult(BaseModel):
    subject: Subject
    result: ExamResult
