class ExamSysError(Exception):
    """Base class for errors that end an exam session."""


class InvalidExamTypeError(ExamSysError):
    """Exam type selector was neither Final (1) nor Practical (2)."""


class InputParseError(ExamSysError):
    """A whole number was expected but the input could not be parsed."""


class AnswerIndexError(ExamSysError):
    """An answer selector points outside a question's answer slots."""


class InputClosedError(ExamSysError):
    """The input stream ended before the session asked for everything it needs."""
