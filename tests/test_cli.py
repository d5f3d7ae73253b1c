"""Tests for the ``showcase`` command functions."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import msgspec.json as msgspec_json
import pytest

from css_showcase import cli
from css_showcase.sources import LoadError

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def stylesheet_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a root style-sheet importing a documented component file."""
    monkeypatch.chdir(tmp_path)
    css_dir = tmp_path / "css"
    css_dir.mkdir()
    (css_dir / "main.css").write_text('@import "buttons.css";\n', encoding="utf-8")
    (css_dir / "buttons.css").write_text(
        dedent(
            """
            /**
             * Buttons
             *
             * @section controls
             * @base .btn Button
             * @modifier .primary Primary action
             * @example
             * <a class="btn">Go</a>
             */
            .btn { padding: 0; }
            """
        ).lstrip(),
        encoding="utf-8",
    )
    return css_dir / "main.css"


def test_build_prints_json(
    stylesheet_tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without ``--output`` the showcase JSON goes to stdout."""
    cli.build(str(stylesheet_tree))
    payload = msgspec_json.decode(capsys.readouterr().out)

    assert [item["section"] for item in payload] == ["controls"]
    subitems = payload[0]["subitems"]
    assert [sub["id"] for sub in subitems] == ["_btn", "_btn_primary"]
    assert subitems[1]["example"] == '<a class="btn primary">Go</a>'


def test_build_writes_output_file(
    stylesheet_tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``--output`` writes the JSON file and reports its path."""
    output = tmp_path / "public" / "showcase.json"
    cli.build("css/main.css", output=output)

    assert capsys.readouterr().out.strip() == "wrote public/showcase.json"
    payload = msgspec_json.decode(output.read_bytes())
    assert payload[0]["anchor"] == "section_controls"


def test_build_honours_config_file(stylesheet_tree: Path, tmp_path: Path) -> None:
    """Options from the YAML file reach the builder."""
    config = tmp_path / "showcase.yaml"
    config.write_text("ids:\n  selector_based: false\n", encoding="utf-8")
    output = tmp_path / "out.json"
    cli.build(str(stylesheet_tree), config=config, output=output)

    payload = msgspec_json.decode(output.read_bytes())
    assert [sub["id"] for sub in payload[0]["subitems"]] == ["1_0", "1_4"]


def test_build_fails_on_missing_import(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A broken import aborts without printing partial output."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "main.css").write_text('@import "gone.css";', encoding="utf-8")
    with pytest.raises(LoadError, match=r"gone\.css"):
        cli.build("main.css")
    assert capsys.readouterr().out == ""


def test_tags_lists_imports_and_tags(
    stylesheet_tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``showcase tags`` prints each comment's tags."""
    cli.tags("css/buttons.css")
    assert capsys.readouterr().out.splitlines() == [
        "# doc 1",
        "@$title Buttons",
        "@section controls",
        "@base .btn Button",
        "@modifier .primary Primary action",
        '@example <a class="btn">Go</a>',
    ]

    cli.tags("css/main.css")
    assert capsys.readouterr().out.splitlines()[0] == "import css/buttons.css"
