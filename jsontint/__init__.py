from jsontint.__version__ import __version__
from jsontint.errors import (
    DepthExceeded,
    RenderError,
    RenderIOError,
    UnsupportedNumber,
    UnsupportedValue,
)
from jsontint.theme import (
    DEFAULT_STYLES,
    NO_STYLE,
    Role,
    StyleSpec,
    Theme,
    default_theme,
    plain_theme,
)
from jsontint.sink import ColorChoice, Sink, StreamSink, stream_supports_color
from jsontint.render import RenderOptions, compact, render
from jsontint._dump import dump, dumps, print_json

# LOG_FORMAT is the standard format for use with the logging module.
LOG_FORMAT = "%(levelname)s: [%(process)s] %(name)s: %(message)s"
