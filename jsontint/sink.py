import abc
import enum
import logging
import os
from typing import TextIO

import termcolor

from jsontint.theme import StyleSpec

logger = logging.getLogger("jsontint.sink")


class ColorChoice(str, enum.Enum):
    always = "always"
    auto = "auto"
    never = "never"

    @classmethod
    def parse(cls, value: str) -> "ColorChoice":
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"invalid color choice {value!r}; expected one of: {valid}") from None


class Sink(metaclass=abc.ABCMeta):
    """
    Sink is the destination of rendered output: text plus instructions to change the style of the
    text that follows.

    The renderer always pairs set_style() with a reset_style() before the next token, so an
    implementation never has to track nested styles. Implementations report failures to accept
    output by raising OSError.
    """

    @abc.abstractmethod
    def write(self, text: str) -> None:
        pass

    @abc.abstractmethod
    def set_style(self, style: StyleSpec) -> None:
        pass

    @abc.abstractmethod
    def reset_style(self) -> None:
        pass

    @abc.abstractmethod
    def supports_color(self) -> bool:
        """
        Return whether style changes are honored at all. When False the renderer takes the plain
        path and never calls set_style() or reset_style().
        """
        pass


def stream_supports_color(stream: TextIO) -> bool:
    """
    Decide whether ANSI styling on the given stream would be seen by a person.

    NO_COLOR wins over FORCE_COLOR, which wins over TERM=dumb; otherwise the stream must be a tty.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # isatty() on a closed stream.
        return False


class StreamSink(Sink):
    """
    StreamSink writes to a text stream, expressing styles as ANSI escape sequences.

    Color support is decided once, when the sink is created.
    """

    def __init__(self, stream: TextIO, color: ColorChoice = ColorChoice.auto) -> None:
        self.stream = stream
        color = ColorChoice(color)
        if color == ColorChoice.always:
            self._color = True
        elif color == ColorChoice.never:
            self._color = False
        else:
            self._color = stream_supports_color(stream)
        logger.debug(f"color choice {color.value} resolved to color={self._color}")

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except ValueError as e:
            # Writing to a closed stream.
            raise OSError(str(e)) from e

    def write(self, text: str) -> None:
        self._write(text)

    def set_style(self, style: StyleSpec) -> None:
        seq = style.ansi()
        if seq:
            self._write(seq)

    def reset_style(self) -> None:
        self._write(termcolor.RESET)

    def supports_color(self) -> bool:
        return self._color
