import sys
from typing import Iterator

import pytest

_ENV_VARS = ["NO_COLOR", "FORCE_COLOR", "TERM", "JSONTINT_COLOR", "JSONTINT_THEME", "JSONTINT_DEBUG"]

# sys.set_int_max_str_digits() refuses anything lower than this.
INT_DIGITS_LIMIT = 640


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Color decisions depend on the environment of whoever runs the tests.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def int_digits_limit() -> Iterator[int]:
    """Limit int/str conversions to INT_DIGITS_LIMIT digits for the duration of a test."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no integer string conversion limit")
    old = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(INT_DIGITS_LIMIT)
    try:
        yield INT_DIGITS_LIMIT
    finally:
        sys.set_int_max_str_digits(old)
