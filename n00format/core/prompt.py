"""Console prompt asking whether an existing file may be overwritten."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, TextIO

PROMPT_TEMPLATE = "File {path} already exists. Overwrite? (y/N/a for all): "


class OverwriteDecision(Enum):
    YES = "yes"
    NO = "no"
    ALL = "all"


def parse_overwrite_answer(answer: str) -> OverwriteDecision:
    """Map a raw console answer to a decision; unknown input means NO."""

    lower = answer.rstrip("\r\n").lower()
    if lower in {"a", "all"}:
        return OverwriteDecision.ALL
    if lower in {"y", "yes"}:
        return OverwriteDecision.YES
    return OverwriteDecision.NO


@contextmanager
def console_session(
    stdin: TextIO, stdout: TextIO
) -> Iterator[tuple[TextIO, TextIO]]:
    try:
        yield stdin, stdout
    finally:
        stdout.flush()


class ConsolePrompt:
    """Ask yes/no/all questions on a pair of text streams."""

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def ask(self, relative_path: str) -> OverwriteDecision:
        stdin = self.stdin or sys.stdin
        stdout = self.stdout or sys.stdout
        with console_session(stdin, stdout) as (reader, writer):
            writer.write(PROMPT_TEMPLATE.format(path=relative_path))
            writer.flush()
            answer = reader.readline()
        return parse_overwrite_answer(answer)

    __call__ = ask


def ask_overwrite(relative_path: str) -> OverwriteDecision:
    return ConsolePrompt().ask(relative_path)
