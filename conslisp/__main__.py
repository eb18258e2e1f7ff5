import argparse
import sys

from conslisp import __version__
from conslisp.config import configure_logging
from conslisp.debug_utils.pprint import format_error, show
from conslisp.interpreter import Interpreter
from conslisp.repl import repl
from conslisp.types.errors import ConsLispError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="conslisp", description="conslisp interpreter")
    parser.add_argument("file", nargs="?", help="source file to run; starts a REPL if omitted")
    parser.add_argument("--version", action="version", version=f"conslisp {__version__}")
    args = parser.parse_args(argv)

    configure_logging()
    interp = Interpreter()
    if args.file is None:
        repl(interp)
        return 0
    try:
        result = interp.load(args.file)
    except (ConsLispError, OSError) as e:
        print(format_error(e), file=sys.stderr)
        return 1
    print(show(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
