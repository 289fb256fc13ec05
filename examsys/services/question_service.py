from typing import Iterable, List

from examsys.core.console import Console
from examsys.schemas.question import TRUE_FALSE_TEXTS, Question, QuestionType

NO_ANSWER_TEXT = "N/A"

_HEADINGS = {
    QuestionType.true_false: "True/False Question",
    QuestionType.multiple_choice: "MCQ Question",
}


def show_details(question: Question, console: Console) -> None:
    """Write the prompt and its numbered choices; empty answer slots are skipped."""

    console.write(f"{_HEADINGS[question.question_type]}: {question.header}")
    console.write(question.body)

    if question.question_type == QuestionType.true_false:
        for number, text in enumerate(TRUE_FALSE_TEXTS, start=1):
            console.write(f"{number}: {text}")
        return

    for index, answer in enumerate(question.answers):
        if answer is not None:
            console.write(f"{index + 1}: {answer.text}")


def correct_answer_text(question: Question) -> str:
    answer = question.correct_answer
    return answer.text if answer else NO_ANSWER_TEXT


def sort_questions(questions: Iterable[Question]) -> List[Question]:
    """Order questions by header using plain code point comparison."""

    return sorted(questions)
