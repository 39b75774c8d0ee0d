"""
Validated console reads.

Each helper writes its prompt, reads one line and retries until the line
parses. An exhausted stream raises ``EOFError``.
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO, TypeVar


T = TypeVar("T")


def _next_line(prompt: str, stdin: TextIO | None, stdout: TextIO | None) -> str:
    out = stdout or sys.stdout
    out.write(prompt)
    out.flush()
    line = (stdin or sys.stdin).readline()
    if line == "":
        raise EOFError("end of input")
    return line.rstrip("\r\n")


def _read_parsed(
    prompt: str,
    parse: Callable[[str], T],
    error: str,
    stdin: TextIO | None,
    stdout: TextIO | None,
) -> T:
    while True:
        raw = _next_line(prompt, stdin, stdout)
        try:
            return parse(raw.strip())
        except ValueError:
            print(error, file=stdout or sys.stdout)


def read_int(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    return _read_parsed(prompt, int, "Please enter a valid integer.", stdin, stdout)


def read_float(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> float:
    return _read_parsed(prompt, float, "Please enter a valid number.", stdin, stdout)


def read_line(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    return _next_line(prompt, stdin, stdout)
