import io
import json
import sys
from typing import Any, Optional, TextIO, Tuple, Union

from jsontint.render import RenderOptions, render
from jsontint.sink import ColorChoice, StreamSink
from jsontint.theme import Theme


def dump(
    value: Any,
    stream: TextIO,
    theme: Optional[Theme] = None,
    indent: Union[None, int, str] = 2,
    separators: Optional[Tuple[str, str]] = None,
    ensure_ascii: bool = False,
    color: ColorChoice = ColorChoice.auto,
) -> None:
    """
    Write value to stream as JSON, colored when the stream is a terminal (see ColorChoice).

    Pass indent=None for single-line output.
    """
    options = RenderOptions(indent=indent, separators=separators, ensure_ascii=ensure_ascii)
    render(value, theme, StreamSink(stream, color), options)


def dumps(
    value: Any,
    theme: Optional[Theme] = None,
    indent: Union[None, int, str] = 2,
    separators: Optional[Tuple[str, str]] = None,
    ensure_ascii: bool = False,
    color: ColorChoice = ColorChoice.always,
) -> str:
    """
    Return value rendered as JSON text. The text is colored unless color is ColorChoice.never,
    since there is no terminal to ask.
    """
    buf = io.StringIO()
    dump(
        value,
        buf,
        theme=theme,
        indent=indent,
        separators=separators,
        ensure_ascii=ensure_ascii,
        color=color,
    )
    return buf.getvalue()


def print_json(
    data: Any,
    stream: Optional[TextIO] = None,
    theme: Optional[Theme] = None,
    indent: Union[None, int, str] = 2,
    color: ColorChoice = ColorChoice.auto,
) -> None:
    """
    Print JSON data in a human-readable format.

    A str is treated as a JSON document and parsed first; strings that are not valid JSON are
    printed verbatim.
    """
    out = stream if stream is not None else sys.stdout
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.decoder.JSONDecodeError:
            out.write(data + "\n")
            return
    dump(data, out, theme=theme, indent=indent, color=color)
    out.write("\n")
