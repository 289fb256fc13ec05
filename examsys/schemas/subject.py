from typing import Optional

from pydantic import BaseModel

from examsys.schemas.exam import Exam


class Subject(BaseModel):
    """A named subject owning at most one exam."""

    id: int
    name: str
    exam: Optional[Exam] = None
