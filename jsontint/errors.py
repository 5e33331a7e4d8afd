from typing import Any


class RenderError(Exception):
    """
    Base class for every failure raised while rendering a value.
    """

    pass


class RenderIOError(RenderError):
    """
    RenderIOError is raised when the sink fails to accept output. The underlying OSError is
    chained as __cause__; whatever was written before the failure stays written.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to write rendered output: {message}")


class UnsupportedNumber(RenderError, ValueError):
    """
    UnsupportedNumber is raised for numbers that have no JSON text: NaN, the infinities and
    integers longer than the interpreter will convert to a string.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class UnsupportedValue(RenderError, TypeError):
    """
    UnsupportedValue is raised for values, or object keys, whose type has no JSON form.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class DepthExceeded(RenderError):
    """
    DepthExceeded is raised when a value nests deeper than the interpreter can recurse, which
    includes any container that contains itself.
    """

    def __init__(self, message: str = "value is nested too deeply to render") -> None:
        super().__init__(message)


class CliError(Exception):
    """
    Base class for all CLI errors.
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
