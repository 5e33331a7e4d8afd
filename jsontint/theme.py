"""
Themes map each syntactic role of rendered JSON to a style.

Styles use termcolor's vocabulary for colors ("blue", "light_blue"), highlights ("on_black") and
attributes ("bold", "underline"), so anything termcolor can print a theme can express.
"""
import dataclasses
import enum
import types
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import termcolor


class Role(enum.Enum):
    OBJECT_KEY = "object_key"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    PUNCTUATION = "punctuation"


@dataclasses.dataclass(frozen=True)
class StyleSpec:
    """
    StyleSpec describes how one token is styled: a foreground color, a background highlight and
    a set of text attributes. Every field is optional; StyleSpec() means "no styling".
    """

    color: Optional[str] = None
    on_color: Optional[str] = None
    attrs: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of attributes but store a tuple so specs stay hashable.
        object.__setattr__(self, "attrs", tuple(self.attrs))
        if self.color is not None and self.color not in termcolor.COLORS:
            raise ValueError(f"unknown color: {self.color!r}")
        if self.on_color is not None and self.on_color not in termcolor.HIGHLIGHTS:
            raise ValueError(f"unknown highlight: {self.on_color!r}")
        for attr in self.attrs:
            if attr not in termcolor.ATTRIBUTES:
                raise ValueError(f"unknown attribute: {attr!r}")

    @property
    def is_plain(self) -> bool:
        return self.color is None and self.on_color is None and not self.attrs

    def ansi(self) -> str:
        """
        Return the escape sequence that switches a terminal to this style: the color code, then
        the highlight code, then one code per attribute. Plain styles produce an empty string.
        """
        codes = []
        if self.color is not None:
            codes.append(termcolor.COLORS[self.color])
        if self.on_color is not None:
            codes.append(termcolor.HIGHLIGHTS[self.on_color])
        codes.extend(termcolor.ATTRIBUTES[attr] for attr in self.attrs)
        return "".join("\033[%dm" % code for code in codes)

    @classmethod
    def from_config(cls, data: Union[None, str, Mapping[str, Any]]) -> "StyleSpec":
        """
        Build a style from its config form: None, a bare color name, or a mapping with any of
        the keys "color", "on_color" and "attrs".
        """
        if data is None:
            return cls()
        if isinstance(data, str):
            return cls(color=data)
        if not isinstance(data, Mapping):
            raise ValueError(f"invalid style: {data!r}")
        unknown = set(data) - {"color", "on_color", "attrs"}
        if unknown:
            raise ValueError(f"invalid style keys: {', '.join(sorted(unknown))}")
        attrs = data.get("attrs") or ()
        if isinstance(attrs, str):
            attrs = (attrs,)
        return cls(color=data.get("color"), on_color=data.get("on_color"), attrs=attrs)

    def to_config(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.color is not None:
            out["color"] = self.color
        if self.on_color is not None:
            out["on_color"] = self.on_color
        if self.attrs:
            out["attrs"] = list(self.attrs)
        return out


NO_STYLE = StyleSpec()

# Cyan primitives and green strings read well on both light and dark backgrounds; punctuation
# keeps the terminal's own foreground.
DEFAULT_STYLES: Mapping[Role, StyleSpec] = types.MappingProxyType(
    {
        Role.OBJECT_KEY: StyleSpec(color="light_blue"),
        Role.STRING: StyleSpec(color="green"),
        Role.NUMBER: StyleSpec(color="cyan"),
        Role.BOOLEAN: StyleSpec(color="cyan", attrs=("bold",)),
        Role.NULL: StyleSpec(color="cyan", attrs=("bold",)),
        Role.PUNCTUATION: NO_STYLE,
    }
)


@dataclasses.dataclass(frozen=True)
class Theme:
    """
    Theme is an immutable mapping from every Role to a StyleSpec.

    Roles left out of the mapping passed to the constructor are unstyled. Themes are never
    modified in place; with_role() returns a new theme, so a single theme may be shared freely
    between threads.
    """

    styles: Mapping[Role, StyleSpec] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        filled = {role: self.styles.get(role, NO_STYLE) for role in Role}
        object.__setattr__(self, "styles", types.MappingProxyType(filled))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return dict(self.styles) == dict(other.styles)

    def __hash__(self) -> int:
        return hash(tuple(self.styles[role] for role in Role))

    def style_for(self, role: Role) -> StyleSpec:
        return self.styles[role]

    def with_role(self, role: Role, style: StyleSpec) -> "Theme":
        styles = dict(self.styles)
        styles[role] = style
        return Theme(styles)

    def with_roles(self, styles: Mapping[Role, StyleSpec]) -> "Theme":
        merged = dict(self.styles)
        merged.update(styles)
        return Theme(merged)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional["Theme"] = None) -> "Theme":
        """
        Build a theme from a mapping of role name to style config, layered over base (the
        default theme when omitted). Role names are the Role values, e.g. "object_key".
        """
        if base is None:
            base = default_theme()
        styles = {}
        for name, style in data.items():
            try:
                role = Role(name)
            except ValueError:
                valid = ", ".join(r.value for r in Role)
                raise ValueError(f"unknown role {name!r}; expected one of: {valid}") from None
            styles[role] = StyleSpec.from_config(style)
        return base.with_roles(styles)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {role.value: self.styles[role].to_config() for role in Role}


def default_theme() -> Theme:
    return Theme(DEFAULT_STYLES)


def plain_theme() -> Theme:
    """Return a theme in which no role is styled."""
    return Theme()
