"""Tests for the demo CLI."""

import io

import pytest

from msvg.app import main
from msvg.core.settings import ENV_LOG_DIR, ENV_LOG_LEVEL

DEMO_OUTPUT = (
    "none\n"
    "purple\n"
    "rgb(100,200,255)\n"
    "rgba(100,200,255,0.5)\n"
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
    '  <circle cx="1" cy="2" r="3.5" fill="rgba(100,200,255,0.5)" stroke="purple"/>\n'
    "</svg>"
)


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(ENV_LOG_LEVEL, "")
    monkeypatch.setenv(ENV_LOG_DIR, "")


def run(*argv):
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue()


class TestDemo:
    def test_default_output(self):
        assert run() == (0, DEMO_OUTPUT)

    def test_no_colors(self):
        code, text = run("--no-colors")
        assert code == 0
        assert text.startswith("<?xml")

    def test_options(self):
        code, text = run(
            "--no-colors", "--no-fill", "--cx", "5", "--cy", "6", "--r", "0.25",
            "--stroke", "black", "--stroke-width", "2", "--linecap", "round", "--linejoin", "miter-clip",
        )
        assert code == 0
        assert (
            '  <circle cx="5" cy="6" r="0.25" stroke="black" stroke-width="2"'
            ' stroke-linecap="round" stroke-linejoin="miter-clip"/>\n'
        ) in text

    def test_no_stroke_custom_fill(self):
        _, text = run("--no-colors", "--no-stroke", "--fill", "red")
        assert '<circle cx="1" cy="2" r="3.5" fill="red"/>' in text

    def test_bad_linecap(self):
        code, text = run("--linecap", "blunt")
        assert code == 2
        assert text == ""

    def test_bad_number(self):
        with pytest.raises(SystemExit) as e:
            run("--r", "big")
        assert e.value.code == 2
