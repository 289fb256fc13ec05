from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from examsys.core.errors import AnswerIndexError

TRUE_FALSE_TEXTS = ("True", "False")


class Answer(BaseModel):
    """A single labeled choice for a question."""

    id: int
    text: str

    model_config = ConfigDict(frozen=True)


class QuestionType(str, Enum):
    true_false = "true_false"
    multiple_choice = "multiple_choice"


class Question(BaseModel):
    """A question with fixed answer slots and one designated correct slot.

    Slots are addressed by zero-based index and may stay empty (``None``).
    ``correct_index`` points at a populated slot once designated.
    """

    question_type: QuestionType
    header: str
    body: str
    mark: int
    answers: List[Optional[Answer]]
    correct_index: Optional[int] = Field(default=None, description="Zero-based slot of the correct answer")

    @model_validator(mode="after")
    def validate_type_specific(self) -> "Question":
        if self.question_type == QuestionType.true_false:
            texts = tuple(answer.text if answer else None for answer in self.answers)
            if texts != TRUE_FALSE_TEXTS:
                raise ValueError("true/false questions must have exactly the answers 'True' and 'False'")
        if self.correct_index is not None:
            if not 0 <= self.correct_index < len(self.answers):
                raise ValueError(f"correct_index {self.correct_index} is outside the answer slots")
            if self.answers[self.correct_index] is None:
                raise ValueError(f"correct_index {self.correct_index} points at an empty slot")
        return self

    @classmethod
    def true_false(cls, header: str, body: str, mark: int) -> "Question":
        answers = [Answer(id=pos + 1, text=text) for pos, text in enumerate(TRUE_FALSE_TEXTS)]
        return cls(question_type=QuestionType.true_false, header=header, body=body, mark=mark, answers=answers)

    @classmethod
    def multiple_choice(cls, header: str, body: str, mark: int, answer_count: int) -> "Question":
        if answer_count < 0:
            raise ValueError(f"answer count cannot be negative: {answer_count}")
        return cls(
            question_type=QuestionType.multiple_choice,
            header=header,
            body=body,
            mark=mark,
            answers=[None] * answer_count,
        )

    @property
    def correct_answer(self) -> Optional[Answer]:
        if self.correct_index is None:
            return None
        return self.answers[self.correct_index]

    def set_answer(self, index: int, text: str) -> Answer:
        """Fill slot ``index`` with a new answer numbered ``index + 1``."""

        if self.question_type == QuestionType.true_false:
            raise ValueError("true/false answers are fixed")
        self._check_slot(index)
        answer = Answer(id=index + 1, text=text)
        self.answers[index] = answer
        return answer

    def set_correct_answer(self, index: int) -> Answer:
        self._check_slot(index)
        answer = self.answers[index]
        if answer is None:
            raise AnswerIndexError(f"Answer {index + 1} has not been entered")
        self.correct_index = index
        return answer

    def _check_slot(self, index: int) -> None:
        if not 0 <= index < len(self.answers):
            raise AnswerIndexError(f"Answer {index + 1} is out of range (1-{len(self.answers)})")

    def __lt__(self, other: "Question") -> bool:
        # str comparison is by code point, independent of locale
        if not isinstance(other, Question):
            return NotImplemented
        return self.header < other.header

    def __str__(self) -> str:
        return f"{self.header} - {self.body}"
