import argparse
import logging
import sys
from typing import List, Optional

from examsys.core.config import AnswerPolicy, get_settings
from examsys.core.console import Console
from examsys.core.errors import ExamSysError
from examsys.services.session_service import run_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examsys",
        description="Define a subject and exam at the console, then take it and get a score.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides EXAMSYS_LOG_LEVEL)",
    )
    parser.add_argument(
        "--answer-policy",
        choices=[policy.value for policy in AnswerPolicy],
        help="How invalid answers are scored: 'wrong' counts them wrong, 'abort' ends the exam",
    )
    return parser


def configure_logging(level: str) -> None:
    # Logs go to stderr so they never interleave with the exam transcript.
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.answer_policy:
        settings = settings.model_copy(update={"invalid_answer_policy": AnswerPolicy(args.answer_policy)})
    configure_logging(args.log_level or settings.log_level)
    logger.info("%s starting (invalid answers: %s)", settings.project_name, settings.invalid_answer_policy.value)

    try:
        run_session(Console(), settings)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except (ExamSysError, ValueError) as exc:
        logger.debug("Session aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
