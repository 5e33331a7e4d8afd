"""
Render JSON-like values to a Sink, styling each token by its role.

test value:
    {"a": "b", "c": ["1", 2.0, 3.1, 5, "4", {"d": true, "e": null, "f": [1, 2, 3]}]}
"""
import dataclasses
import json
import logging
import math
from json import encoder as json_encoder
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from jsontint import errors
from jsontint.sink import Sink
from jsontint.theme import Role, Theme, default_theme

logger = logging.getLogger("jsontint")

PRETTY_SEPARATORS = (",", ": ")
COMPACT_SEPARATORS = (",", ":")


@dataclasses.dataclass(frozen=True)
class RenderOptions:
    """
    RenderOptions controls the layout of rendered JSON.

    indent is None for single-line output, or either a number of spaces or an indent string (such
    as "\\t") for multi-line output. separators is an (item_separator, key_separator) pair and
    defaults to (",", ": ") when indenting and (",", ":") otherwise.
    """

    indent: Union[None, int, str] = 2
    separators: Optional[Tuple[str, str]] = None
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, int) and not isinstance(self.indent, bool):
            if self.indent < 0:
                raise ValueError(f"indent must not be negative, got {self.indent}")
        elif self.indent is not None and not isinstance(self.indent, str):
            raise ValueError(f"indent must be None, an int or a str, got {self.indent!r}")
        if self.separators is not None and len(self.separators) != 2:
            raise ValueError("separators must be an (item_separator, key_separator) pair")

    @property
    def pretty(self) -> bool:
        return self.indent is not None

    @property
    def indent_unit(self) -> str:
        if self.indent is None:
            return ""
        if isinstance(self.indent, int):
            return " " * self.indent
        return self.indent

    def resolved_separators(self) -> Tuple[str, str]:
        if self.separators is not None:
            return (self.separators[0], self.separators[1])
        return PRETTY_SEPARATORS if self.pretty else COMPACT_SEPARATORS


def compact() -> RenderOptions:
    return RenderOptions(indent=None)


def _float_text(o: float) -> str:
    if not math.isfinite(o):
        raise errors.UnsupportedNumber(
            f"Out of range float values are not JSON compliant: {o!r}", value=o
        )
    return float.__repr__(o)


def _int_text(o: int) -> str:
    try:
        return int.__repr__(o)
    except ValueError as e:
        # Integers past sys.get_int_max_str_digits() cannot be converted to text.
        raise errors.UnsupportedNumber(str(e), value=o) from e


def _unsupported(o: Any) -> Any:
    raise errors.UnsupportedValue(
        f"Object of type {type(o).__name__} is not JSON serializable", value=o
    )


def render(
    value: Any,
    theme: Optional[Theme],
    sink: Sink,
    options: Optional[RenderOptions] = None,
) -> None:
    """
    Render value as JSON text to sink, styled with theme (the default theme when omitted).

    Sinks without color support get plain JSON straight from the json module's encoder with no
    style calls at all. Either way the text, with escape sequences removed, is exactly what
    json.dumps() produces for the same options.

    Raises RenderIOError when the sink fails, UnsupportedNumber for NaN, infinite floats and
    integers too long to convert to text, UnsupportedValue for values without a JSON form and
    DepthExceeded for values nested too deeply (including self-containing values). Output
    written before an error is left as is.
    """
    if options is None:
        options = RenderOptions()

    try:
        if not sink.supports_color():
            logger.debug("sink does not support color, rendering plain JSON")
            _render_plain(value, sink, options)
            return
        _render_styled(value, theme if theme is not None else default_theme(), sink, options)
    except errors.RenderError:
        raise
    except OSError as e:
        raise errors.RenderIOError(str(e)) from e
    except RecursionError as e:
        raise errors.DepthExceeded() from e


def _render_plain(value: Any, sink: Sink, options: RenderOptions) -> None:
    for chunk in _plain_chunks(value, options):
        sink.write(chunk)


def _plain_chunks(value: Any, options: RenderOptions) -> Iterator[str]:
    enc = json.JSONEncoder(
        ensure_ascii=options.ensure_ascii,
        allow_nan=False,
        indent=options.indent,
        separators=options.resolved_separators(),
        default=_unsupported,
    )
    # Only failures raised by the encoder are translated; sink failures happen in the caller.
    chunks = enc.iterencode(value)
    while True:
        try:
            chunk = next(chunks)
        except StopIteration:
            return
        except errors.RenderError:
            raise
        except ValueError as e:
            msg = str(e)
            if msg.startswith("Out of range float") or msg.startswith("Exceeds the limit"):
                raise errors.UnsupportedNumber(msg) from e
            if msg.startswith("Circular reference"):
                raise errors.DepthExceeded("value contains a circular reference") from e
            raise
        except TypeError as e:
            # Bad object keys; unsupported values already went through _unsupported().
            raise errors.UnsupportedValue(str(e)) from e
        yield chunk


def _render_styled(value: Any, theme: Theme, sink: Sink, options: RenderOptions) -> None:
    indent = options.indent_unit
    pretty = options.pretty
    item_separator, key_separator = options.resolved_separators()
    encode_str: Callable[[str], str] = (
        json_encoder.encode_basestring_ascii
        if options.ensure_ascii
        else json_encoder.encode_basestring
    )

    # Resolve every style once; plain styles skip the set/reset pair entirely.
    styles = {role: theme.style_for(role) for role in Role}
    styled = {role: not style.is_plain for role, style in styles.items()}

    def emit(role: Role, text: str) -> None:
        if styled[role]:
            sink.set_style(styles[role])
            sink.write(text)
            sink.reset_style()
        else:
            sink.write(text)

    def key_text(key: Any) -> str:
        if isinstance(key, str):
            pass
        elif isinstance(key, float):
            key = _float_text(key)
        elif key is True:
            key = "true"
        elif key is False:
            key = "false"
        elif key is None:
            key = "null"
        elif isinstance(key, int):
            key = _int_text(key)
        else:
            raise errors.UnsupportedValue(
                f"keys must be str, int, float, bool or None, not {type(key).__name__}",
                value=key,
            )
        return encode_str(key)

    def newline(depth: int) -> None:
        if pretty:
            sink.write("\n" + indent * depth)

    def do_render(obj: Any, depth: int) -> None:
        if obj is None:
            emit(Role.NULL, "null")
            return

        if obj is True:
            emit(Role.BOOLEAN, "true")
            return

        if obj is False:
            emit(Role.BOOLEAN, "false")
            return

        if isinstance(obj, str):
            emit(Role.STRING, encode_str(obj))
            return

        if isinstance(obj, int):
            emit(Role.NUMBER, _int_text(obj))
            return

        if isinstance(obj, float):
            emit(Role.NUMBER, _float_text(obj))
            return

        if isinstance(obj, (list, tuple)):
            if len(obj) == 0:
                emit(Role.PUNCTUATION, "[]")
                return

            emit(Role.PUNCTUATION, "[")
            first = True
            for item in obj:
                if not first:
                    emit(Role.PUNCTUATION, item_separator)
                first = False
                newline(depth + 1)
                do_render(item, depth + 1)
            newline(depth)
            emit(Role.PUNCTUATION, "]")
            return

        if isinstance(obj, dict):
            if len(obj) == 0:
                emit(Role.PUNCTUATION, "{}")
                return

            emit(Role.PUNCTUATION, "{")
            first = True
            for key, item in obj.items():
                if not first:
                    emit(Role.PUNCTUATION, item_separator)
                first = False
                newline(depth + 1)
                emit(Role.OBJECT_KEY, key_text(key))
                emit(Role.PUNCTUATION, key_separator)
                do_render(item, depth + 1)
            newline(depth)
            emit(Role.PUNCTUATION, "}")
            return

        _unsupported(obj)

    do_render(value, depth=0)
