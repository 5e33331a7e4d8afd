import io
import json
import pathlib
from typing import Any

import pytest

from jsontint import cli, config
from tests.util import strip_ansi

DOC = {"string": "value", "number": 123, "bool": True, "null": None, "nested": {"a": [1, 2]}}


def _write_doc(tmp_path: pathlib.Path, name: str, doc: Any) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(doc))
    return str(path)


def test_pretty_file(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    cli.main([path, "--color", "never"])
    assert capsys.readouterr().out == json.dumps(DOC, indent=2) + "\n"


def test_compact_multiple_files(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    first = _write_doc(tmp_path, "a.json", DOC)
    second = _write_doc(tmp_path, "b.json", [])
    cli.main(["--compact", first, second])
    assert capsys.readouterr().out == json.dumps(DOC, separators=(",", ":")) + "\n[]\n"


def test_tab_and_ascii(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", {"é": [1]})
    cli.main(["--tab", "--ascii", path])
    assert capsys.readouterr().out == '{\n\t"\\u00e9": [\n\t\t1\n\t]\n}\n'


def test_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"b": 1, "a": 2}'))
    cli.main(["--indent", "4"])
    assert capsys.readouterr().out == '{\n    "b": 1,\n    "a": 2\n}\n'


def test_color_always(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    cli.main([path, "--color", "always"])
    out = capsys.readouterr().out
    assert "\x1b[94m" in out
    assert strip_ansi(out) == json.dumps(DOC, indent=2) + "\n"


def test_color_from_env(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    monkeypatch.setenv(config.COLOR_ENV, "always")
    cli.main([path])
    assert "\x1b[" in capsys.readouterr().out


def test_plain_theme_with_color(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    cli.main([path, "--color", "always", "--plain-theme"])
    assert capsys.readouterr().out == json.dumps(DOC, indent=2) + "\n"


def test_theme_file(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", {"k": "v"})
    theme = tmp_path / "theme.yaml"
    theme.write_text("base: plain\nobject_key: magenta\n")
    cli.main([path, "--color", "always", "--compact", "--theme", str(theme)])
    assert capsys.readouterr().out == '{\x1b[35m"k"\x1b[0m:"v"}\n'


def test_bad_theme_file(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    theme = tmp_path / "theme.yaml"
    theme.write_text("keys: red\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([path, "--theme", str(theme)])
    assert exc_info.value.code == 1
    assert "Failed to load theme" in capsys.readouterr().err


def test_invalid_json(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])
    assert exc_info.value.code == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_missing_file(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1
    assert "Failed to read" in capsys.readouterr().err


def test_non_finite_number(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "nan.json"
    path.write_text('{"x": NaN}')
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])
    assert exc_info.value.code == 1
    assert "Out of range float" in capsys.readouterr().err


def test_integer_too_long(
    tmp_path: pathlib.Path, capsys: pytest.CaptureFixture, int_digits_limit: int
) -> None:
    path = tmp_path / "huge.json"
    path.write_text("[" + "9" * (int_digits_limit + 10) + "]")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Exceeds the limit" in err
    assert "Failed to render JSON" not in err


def test_negative_indent(tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:
    path = _write_doc(tmp_path, "doc.json", DOC)
    with pytest.raises(SystemExit) as exc_info:
        cli.main([path, "--indent", "-1"])
    assert exc_info.value.code == 2


def test_conflicting_layout_flags() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--compact", "--tab"])
    assert exc_info.value.code == 2
