import os
import sys
import logging
import argparse

from colorama import just_fix_windows_console

from .errors import VeraError
from .parser import parse
from .table import render_table, PRETTY_BOX, ASCII_BOX

logger = logging.getLogger(__name__)


def print_table(expr, colorize=True, ascii_only=False, out=None):
    """Parse ``expr`` and print its truth table. Returns an exit code."""
    try:
        stmt, index = parse(expr)
        render_table(stmt, index, out=out, charset=ASCII_BOX if ascii_only else PRETTY_BOX,
                     colorize=colorize)
    except VeraError as e:
        print("Error:", e, file=sys.stderr)
        return 1
    return 0


def print_render(expr, out=None):
    try:
        stmt, _ = parse(expr)
    except VeraError as e:
        print("Error:", e, file=sys.stderr)
        return 1
    print(stmt.render(), file=out or sys.stdout)
    return 0


def repl(colorize=True, ascii_only=False):
    print("Truth table generator. Type 'quit' to exit.")
    while True:
        try:
            s = input("vera> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not s:
            continue
        if s.lower() in ('quit', 'exit'):
            return
        print_table(s, colorize=colorize, ascii_only=ascii_only)


def build_parser():
    # Display flags are accepted before or after the subcommand. SUPPRESS keeps a
    # subparser from resetting a flag already given to the root parser.
    display = argparse.ArgumentParser(add_help=False)
    display.add_argument('--no-color', dest='no_color', action='store_true', default=argparse.SUPPRESS,
                         help="Do not colorize the output")
    display.add_argument('--ascii', action='store_true', default=argparse.SUPPRESS,
                         help="Draw the table with ASCII characters only")

    ap = argparse.ArgumentParser(prog='vera', parents=[display],
                                 description="Truth-table generator for propositional logic")
    ap.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    sub = ap.add_subparsers(dest='command')

    tt = sub.add_parser('tt', parents=[display], help="Print the truth table of an expression")
    tt.add_argument('expr', metavar='"EXPR"', help="Expression, e.g. '(a & b) > !c'")

    render = sub.add_parser('render', help="Print the canonical form of an expression")
    render.add_argument('expr', metavar='"EXPR"')

    sub.add_parser('repl', parents=[display], help="Start interactive prompt (default)")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s:%(name)s: %(message)s')
    just_fix_windows_console()

    colorize = not (getattr(args, 'no_color', False) or os.environ.get('NO_COLOR'))
    ascii_only = getattr(args, 'ascii', False)
    logger.debug("command=%s colorize=%s ascii=%s", args.command, colorize, ascii_only)

    if args.command == 'tt':
        return print_table(args.expr, colorize=colorize, ascii_only=ascii_only)
    if args.command == 'render':
        return print_render(args.expr)
    repl(colorize=colorize, ascii_only=ascii_only)
    return 0
