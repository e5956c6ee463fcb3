"""
Line-oriented REPL for pymal.

Each input line is one read/eval/print cycle against a single Interpreter,
so definitions persist across lines. An error ends only the current cycle:
it is printed as ``error: <message>`` and the loop reads the next line.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from pymal.config import get_log_level, get_prompt
from pymal.errors import MalError
from pymal.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run(
    interp: Interpreter,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    prompt: str | None = None,
) -> None:
    """Read lines from `stdin` until EOF, writing results to `stdout`."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        try:
            output = interp.rep(line)
        except (MalError, RecursionError) as ex:
            logger.debug("cycle failed for %r", line, exc_info=True)
            stdout.write(f"error: {ex}\n")
            continue
        if output is not None:
            stdout.write(output + "\n")


def main() -> int:
    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        run(Interpreter())
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
