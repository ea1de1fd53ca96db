import argparse
import logging
import sys

from fwjs.environment import Environment
from fwjs.errors import FWJSError, RecursionDepthExceeded
from fwjs.parser import parse

logger = logging.getLogger(__name__)

# Each FWJS call costs a handful of Python frames.
RECURSION_LIMIT = 10000


def runCode(code, env):
    expr = parse(code)
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, RECURSION_LIMIT))
    try:
        return expr.evaluate(env)
    except RecursionError:
        raise RecursionDepthExceeded(sys.getrecursionlimit()) from None
    finally:
        sys.setrecursionlimit(limit)


def execute(path, env=None):
    if env is None: env = Environment()
    with open(path, "r", encoding="utf-8") as file:
        code = file.read()
    return runCode(code, env)


def repl(env=None):
    if env is None: env = Environment()
    while True:
        try:
            code = input('> ')
        except EOFError:
            break
        if code.strip() == "quit()":
            break
        if code.strip() == "":
            continue
        try:
            print(runCode(code, env))
        except FWJSError as e:
            logger.debug("evaluation failed", exc_info=True)
            print(e)
    return env


def main(argv=None):
    argParser = argparse.ArgumentParser(
        prog="fwjs",
        description="Evaluate Featherweight JavaScript programs",
    )
    argParser.add_argument("path", nargs="?", help="program to run; starts a REPL when omitted")
    argParser.add_argument("--debug", action="store_true", help="log parse trees and scope changes")
    args = argParser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        repl()
        return 0
    try:
        execute(args.path)
    except FWJSError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print("Cannot read %s: %s" % (args.path, e.strerror), file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print("Cannot decode %s: %s" % (args.path, e.reason), file=sys.stderr)
        return 1
    return 0
