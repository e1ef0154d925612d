import sys

import pytest

from intmap.main import main
from intmap.shared import set_debug_trace_probe


@pytest.fixture(autouse=True)
def reset_trace():
    yield
    set_debug_trace_probe(False)


def run(monkeypatch, *args: str):
    monkeypatch.setattr(sys, "argv", ["intmap", *args])
    main()


def test_demo(monkeypatch, capsys):
    run(monkeypatch)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Getting random (first?) element: 4"
    assert lines[1] == "Getting random (first?) element: 4"
    assert lines[2] in (
        "Getting random (first?) element: 4",
        "Getting random (first?) element: 365",
    )
    assert lines[3] == "Getting element with key 2: 365"
    assert lines[4] == "Getting random (first?) element: 4"
    assert lines[5] == "Length: 1"
    assert len(lines) == 6


def test_demo_dump(monkeypatch, capsys):
    run(monkeypatch, "--dump")

    out = capsys.readouterr().out
    assert "== table ==\ncount 1 / capacity 1024\n" in out
    assert " 1 = 4\n" in out


def test_demo_trace(monkeypatch, capsys):
    run(monkeypatch, "--trace")

    assert "probe 1: home" in capsys.readouterr().out


def test_usage(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "--nope")

    assert exc.value.code == 64
    assert capsys.readouterr().out == "Usage: intmap [--trace] [--dump]\n"
