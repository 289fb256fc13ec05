import sys
from collections import deque
from typing import Iterable, List, Optional, TextIO

from examsys.core.errors import InputClosedError, InputParseError


class Console:
    """Line-oriented input/output boundary backed by stdin/stdout."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, line: str = "") -> None:
        print(line, file=self.stdout)

    def read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise InputClosedError("Input ended before the session was complete")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        raw = self.read(prompt)
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise InputParseError(f"Expected a whole number, got {raw!r}") from exc


class ScriptedConsole(Console):
    """Simple in-memory console for unit tests."""

    def __init__(self, inputs: Iterable[object] = ()) -> None:
        self.inputs = deque(str(item) for item in inputs)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def write(self, line: str = "") -> None:
        self.lines.append(line)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise InputClosedError("Input ended before the session was complete")
        return self.inputs.popleft()

    @property
    def output(self) -> str:
        return "\n".join(self.lines)
