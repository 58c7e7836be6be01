"""Interactive read loop: one line in, one result (or error) out."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from lisk import config
from lisk.errors import LiskError
from lisk.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    interpreter: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    prompt: str | None = None,
) -> None:
    """Evaluate each input line until EOF, reporting failures and carrying on."""
    if prompt is None:
        prompt = config.get_prompt()
    stdout.write(prompt)
    stdout.flush()
    for line in stdin:
        if line.strip():
            try:
                stdout.write(interpreter.eval_to_source(line) + "\n")
            except (LiskError, RecursionError) as e:
                logger.debug("evaluation failed for %r", line, exc_info=True)
                stderr.write(f"error: {type(e).__name__}: {e}\n")
                stderr.flush()
        stdout.write(prompt)
        stdout.flush()
    stdout.write("\n")


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    try:
        run_repl(Interpreter(), sys.stdin, sys.stdout, sys.stderr)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
