import logging
import sys

import jsontint


def set_logger(debug_enabled: bool) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)

    for hdlr in list(root.handlers):
        root.removeHandler(hdlr)

    # Rendered JSON goes to stdout, so logs must not.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    formatter = logging.Formatter(jsontint.LOG_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)
