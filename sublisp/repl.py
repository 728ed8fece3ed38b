"""Command line front end: run a script, or read-eval-print interactively.

Each REPL line holds one expression. Errors are reported and the loop moves
on to the next line; only (exit) or end of input stop it.
"""

from __future__ import annotations

import argparse
import atexit
import logging
import sys
import threading
from typing import Any, Callable, Optional, Sequence

from sublisp import config
from sublisp.errors import ParseError, SublispError
from sublisp.interpreter import Interpreter

logger = logging.getLogger(__name__)

PROMPT = "> "


def _enable_history() -> None:
    try:
        import readline
    except ImportError:
        # no line editing on this platform
        return
    history = config.get_history_file()
    try:
        readline.read_history_file(history)
    except OSError:
        pass
    atexit.register(readline.write_history_file, history)


def eval_line(interp: Interpreter, line: str) -> str:
    """Evaluate one line of input and return the printed result."""
    expr, rest = interp.read(line)
    if rest.strip():
        raise ParseError(f'Trailing text "{rest.strip()}"')
    if interp.debug:
        logger.debug("parsed expression: %s", interp.to_string(expr))
    result = interp.evaluate(expr)
    if interp.debug:
        printed = interp.to_debug_string(result)
    else:
        printed = interp.to_string(result)
    interp.collect()
    return printed


def repl(interp: Interpreter, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    interactive = stdin.isatty()
    if interactive:
        _enable_history()

    while True:
        try:
            if interactive:
                line = input(PROMPT)
            else:
                line = stdin.readline()
                if not line:
                    raise EOFError
        except EOFError:
            if interactive:
                stdout.write("\n")
            return 0
        except KeyboardInterrupt:
            stdout.write("\n")
            continue

        if not line.strip():
            continue
        try:
            printed = eval_line(interp, line)
        except SublispError as exc:
            print(f"error: {exc}", file=stderr)
            continue
        print(printed, file=stdout)


def run_with_large_stack(func: Callable[..., Any], *args: Any) -> Any:
    """Run func(*args) on a thread with a larger stack and return its result.

    Deep Lisp recursion is then bounded by that stack rather than by the
    main thread's. Exceptions, SystemExit included, are re-raised here.
    """
    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["result"] = func(*args)
        except BaseException as exc:
            outcome["error"] = exc

    previous = threading.stack_size(config.get_stack_size())
    try:
        worker = threading.Thread(target=target, name="sublisp", daemon=True)
        worker.start()
    finally:
        threading.stack_size(previous)
    worker.join()
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sublisp", description="sublisp interpreter")
    parser.add_argument("file", nargs="?", help="script to run (if empty, starts the REPL)")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="start with diagnostic output enabled")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(name)s: %(message)s")
    try:
        return run_with_large_stack(_run, args)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


def _run(args: argparse.Namespace) -> int:
    interp = Interpreter(debug=args.debug)

    if args.file is not None:
        try:
            result = interp.run_file(args.file)
        except OSError as exc:
            print(f"error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 1
        except SublispError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(interp.to_string(result))
        return 0

    return repl(interp)


if __name__ == "__main__":
    sys.exit(main())
