"""
Environment and file based configuration.

Theme files are YAML mappings from role name to style. A style is either a bare color name or a
mapping with "color", "on_color" and "attrs" keys; the optional "base" key picks the theme the
file is layered over ("default" or "plain"):

    base: default
    object_key:
      color: magenta
      attrs: [bold]
    punctuation: dark_grey
    null:
      color: cyan
"""
import io
import logging
import os
import pathlib
from typing import IO, Any, Optional, Union

from ruamel import yaml

from jsontint.sink import ColorChoice
from jsontint.theme import Theme, default_theme, plain_theme

logger = logging.getLogger("jsontint.config")

COLOR_ENV = "JSONTINT_COLOR"
THEME_ENV = "JSONTINT_THEME"
DEBUG_ENV = "JSONTINT_DEBUG"

_BASES = {"default": default_theme, "plain": plain_theme}

_yaml: Optional[yaml.YAML] = None


def _get_yaml() -> yaml.YAML:
    global _yaml
    if _yaml is None:
        _yaml = yaml.YAML(typ="safe", pure=True)
    return _yaml


def debug_mode() -> bool:
    return os.getenv(DEBUG_ENV, "").lower() in ("true", "1", "yes")


def color_from_env() -> ColorChoice:
    value = os.getenv(COLOR_ENV)
    if not value:
        return ColorChoice.auto
    return ColorChoice.parse(value)


def theme_from_dict(data: Any) -> Theme:
    if data is None:
        return default_theme()
    if not isinstance(data, dict):
        raise ValueError(f"theme must be a mapping of role to style, got {type(data).__name__}")
    # YAML reads a bare `null:` key as None.
    data = {("null" if k is None else k): v for k, v in data.items()}
    base_name = data.pop("base", "default")
    if base_name not in _BASES:
        raise ValueError(f"unknown base theme {base_name!r}; expected default or plain")
    return Theme.from_dict(data, base=_BASES[base_name]())


def load_theme(source: Union[str, pathlib.Path, IO[Any]]) -> Theme:
    """
    Load a theme from a YAML file path or an open stream.

    Raises ValueError for malformed YAML or an invalid theme, and OSError when the file cannot be
    read.
    """
    try:
        if isinstance(source, (str, pathlib.Path)):
            logger.debug(f"loading theme from {source}")
            with open(source, "r") as f:
                data = _get_yaml().load(f)
        else:
            data = _get_yaml().load(source)
    except (
        yaml.error.MarkedYAMLWarning,
        yaml.error.MarkedYAMLFutureWarning,
        yaml.error.YAMLError,
    ) as e:
        name = getattr(source, "name", source)
        raise ValueError(f"invalid theme file {name}: {e}") from e
    return theme_from_dict(data)


def load_theme_str(text: str) -> Theme:
    return load_theme(io.StringIO(text))


def theme_from_env() -> Optional[Theme]:
    path = os.getenv(THEME_ENV)
    if not path:
        return None
    return load_theme(path)
