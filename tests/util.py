import re
from typing import Any, List, Optional, Tuple

from jsontint.sink import Sink
from jsontint.theme import StyleSpec

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


class RecordingSink(Sink):
    """
    RecordingSink keeps every call the renderer makes, in order.

    If fail_after is set, the write after that many successful writes raises OSError.
    """

    def __init__(self, color: bool = True, fail_after: Optional[int] = None) -> None:
        self.color = color
        self.fail_after = fail_after
        self.events: List[Tuple[Any, ...]] = []
        self.writes = 0

    def write(self, text: str) -> None:
        if self.fail_after is not None and self.writes >= self.fail_after:
            raise BrokenPipeError(32, "Broken pipe")
        self.writes += 1
        self.events.append(("write", text))

    def set_style(self, style: StyleSpec) -> None:
        self.events.append(("set", style))

    def reset_style(self) -> None:
        self.events.append(("reset",))

    def supports_color(self) -> bool:
        return self.color

    @property
    def text(self) -> str:
        return "".join(e[1] for e in self.events if e[0] == "write")

    @property
    def style_calls(self) -> List[Tuple[Any, ...]]:
        return [e for e in self.events if e[0] != "write"]
