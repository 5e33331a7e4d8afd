import argparse
import json
import logging
import os
import sys
from typing import Any, Iterator, List, Optional, Tuple

import argcomplete
import termcolor

import jsontint
from jsontint import _logging, config, errors
from jsontint.render import RenderOptions, render
from jsontint.sink import ColorChoice, StreamSink
from jsontint.theme import Theme, plain_theme

logger = logging.getLogger("jsontint.cli")

STDIN_NAME = "-"


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsontint",
        description="Pretty-print JSON documents with terminal colors.",
        epilog=(
            f"Environment: {config.COLOR_ENV} sets the default --color, {config.THEME_ENV} "
            f"names a default theme file, NO_COLOR and FORCE_COLOR are honored by --color=auto."
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="JSON files to print; reads standard input when none are given or FILE is -",
    )
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "-c", "--compact", action="store_true", help="print each document on a single line"
    )
    layout.add_argument(
        "--indent", type=int, default=2, metavar="N", help="indent nested values by N spaces"
    )
    layout.add_argument("--tab", action="store_true", help="indent nested values with tabs")
    parser.add_argument(
        "--ascii", action="store_true", help="escape non-ASCII characters as \\uXXXX"
    )
    parser.add_argument(
        "--color",
        choices=[c.value for c in ColorChoice],
        default=None,
        help="when to color output (default: auto)",
    )
    themes = parser.add_mutually_exclusive_group()
    themes.add_argument("--theme", metavar="PATH", help="YAML theme file")
    themes.add_argument(
        "--plain-theme", action="store_true", help="keep color enabled but style nothing"
    )
    parser.add_argument("--debug", action="store_true", help="log debugging information")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {jsontint.__version__}"
    )
    return parser


def die(message: str, always_print_traceback: bool = False, exit_code: int = 1) -> None:
    if always_print_traceback or config.debug_mode():
        import traceback

        traceback.print_exc(file=sys.stderr)

    print(termcolor.colored(message, "red"), file=sys.stderr, end="\n")
    sys.exit(exit_code)


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    if args.compact:
        return RenderOptions(indent=None, ensure_ascii=args.ascii)
    if args.tab:
        return RenderOptions(indent="\t", ensure_ascii=args.ascii)
    if args.indent < 0:
        raise errors.CliError(f"--indent must not be negative, got {args.indent}", exit_code=2)
    return RenderOptions(indent=args.indent, ensure_ascii=args.ascii)


def color_from_args(args: argparse.Namespace) -> ColorChoice:
    if args.color is not None:
        return ColorChoice(args.color)
    try:
        return config.color_from_env()
    except ValueError as e:
        raise errors.CliError(f"{config.COLOR_ENV}: {e}", exit_code=2)


def theme_from_args(args: argparse.Namespace) -> Optional[Theme]:
    if args.plain_theme:
        return plain_theme()
    try:
        if args.theme:
            return config.load_theme(args.theme)
        return config.theme_from_env()
    except (OSError, ValueError) as e:
        raise errors.CliError(f"Failed to load theme: {e}")


def read_documents(files: List[str]) -> Iterator[Tuple[str, Any]]:
    for name in files or [STDIN_NAME]:
        try:
            if name == STDIN_NAME:
                yield "<stdin>", json.load(sys.stdin)
                continue
            with open(name, "r", encoding="utf-8") as f:
                yield name, json.load(f)
        except json.JSONDecodeError as e:
            raise errors.CliError(f"{name}: invalid JSON: {e}")
        except ValueError as e:
            # Numbers longer than sys.get_int_max_str_digits() fail outside the decoder.
            raise errors.CliError(f"{name}: {e}")
        except OSError as e:
            raise errors.CliError(f"Failed to read {name}: {e.strerror or e}")


def run(args: argparse.Namespace) -> None:
    options = options_from_args(args)
    color = color_from_args(args)
    theme = theme_from_args(args)
    sink = StreamSink(sys.stdout, color)

    for name, doc in read_documents(args.files):
        logger.debug(f"rendering {name}")
        try:
            render(doc, theme, sink, options)
            sink.write("\n")
        except errors.RenderError as e:
            raise errors.CliError(f"{name}: {e}")
        except OSError as e:
            raise errors.CliError(f"{name}: {errors.RenderIOError(str(e))}")
    sys.stdout.flush()


def main(
    args: List[str] = sys.argv[1:],
) -> None:
    if sys.platform == "win32":
        # Magic incantation to make a Windows 10 cmd.exe process color-related ANSI escape codes.
        os.system("")

    parser = make_parser()
    argcomplete.autocomplete(parser)

    try:
        parsed_args = parser.parse_args(args)
        _logging.set_logger(parsed_args.debug or config.debug_mode())
        try:
            run(parsed_args)
        except errors.CliError as e:
            die(e.message, exit_code=e.exit_code)
        except Exception:
            die("Failed to render JSON", always_print_traceback=True)
    except KeyboardInterrupt:
        die("Interrupting...", exit_code=3)
