"""Interactive read-eval-print loop.

Commands:
    :q          quit
    :l <path>   evaluate a file
Anything else is evaluated as conslisp source. Errors are reported and the
loop keeps going with the environment intact.
"""

from __future__ import annotations

import atexit
import logging
import sys
from typing import Callable, Optional, TextIO

from conslisp.config import get_history_path, get_prompt
from conslisp.debug_utils.pprint import colorize, format_error, show
from conslisp.interpreter import Interpreter
from conslisp.types.errors import ConsLispError

logger = logging.getLogger(__name__)

QUIT = ":q"
LOAD = ":l"


def _setup_history() -> None:
    try:
        import readline
    except ImportError:
        return
    path = get_history_path()
    if path is None:
        return
    try:
        readline.read_history_file(path)
    except OSError:
        pass
    atexit.register(readline.write_history_file, path)


def handle_line(interp: Interpreter, line: str, out: TextIO, color: bool = False) -> bool:
    """Process one REPL line. Returns False when the loop should stop."""
    line = line.strip()
    if not line:
        return True
    if line == QUIT:
        return False
    try:
        if line == LOAD or line.startswith(LOAD + " "):
            path = line[len(LOAD):].strip()
            if not path:
                out.write("usage: :l <path>\n")
                return True
            result = interp.load(path)
        else:
            result = interp.eval(line)
    except (ConsLispError, OSError) as e:
        logger.info("error reported to user: %s", e)
        out.write(format_error(e, color) + "\n")
        return True
    out.write((colorize(result) if color else show(result)) + "\n")
    return True


def repl(
    interp: Optional[Interpreter] = None,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> None:
    interp = interp if interp is not None else Interpreter(out=out)
    color = out.isatty()
    if input_fn is input:
        _setup_history()
    prompt = get_prompt()
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            out.write("\n")
            break
        except KeyboardInterrupt:
            out.write("\n")
            continue
        if not handle_line(interp, line, out, color):
            break
