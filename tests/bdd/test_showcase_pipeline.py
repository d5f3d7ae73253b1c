"""Behaviour tests for the showcase pipeline using pytest-bdd.

These scenarios build showcase data end-to-end from style-sheets written to a
temporary directory: the root file is resolved with its imports through the
filesystem loader, documentation comments are parsed, and the ordered items
are checked. A second scenario confirms that a broken import aborts the run.

Usage
-----
Run ``pytest tests/bdd/test_showcase_pipeline.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, scenarios, then, when

from css_showcase.generator import ShowcaseGenerator
from css_showcase.sources import FileSystemLoader, LoadError

if typ.TYPE_CHECKING:
    from css_showcase.showcase import ShowcaseItem

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "showcase_pipeline.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

BUTTONS_CSS = """
/**
 * Buttons
 *
 * Clickable controls.
 *
 * @section {2 Controls} Controls
 * @base .btn Default button
 * @modifier .btn-large Large button
 * @modifier .btn-ghost Ghost button
 * @state :disabled Disabled
 * @example
 * <button class="btn">Save</button>
 */
"""

TYPOGRAPHY_CSS = """
/**
 * Headings
 *
 * @section {1 Typography} Typography
 * @base h1 Page heading
 * @example
 * <h1>Title</h1>
 */
"""


def _write(directory: Path, name: str, text: str) -> None:
    (directory / name).write_text(dedent(text).lstrip(), encoding="utf-8")


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a root style-sheet importing a documented buttons file")
def given_documented_tree(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write ``main.css`` importing buttons and typography style-sheets."""
    _write(
        tmp_path,
        "main.css",
        '@import "components/buttons.css";\n@import url(typography.css);\n',
    )
    (tmp_path / "components").mkdir()
    _write(tmp_path / "components", "buttons.css", BUTTONS_CSS)
    _write(tmp_path, "typography.css", TYPOGRAPHY_CSS)
    scenario_state["base_dir"] = tmp_path


@given("a root style-sheet importing a file that does not exist")
def given_broken_tree(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write ``main.css`` whose nested import points at a missing file."""
    _write(tmp_path, "main.css", '@import "partials/index.css";\n')
    (tmp_path / "partials").mkdir()
    _write(tmp_path / "partials", "index.css", '@import "missing.css";\n')
    scenario_state["base_dir"] = tmp_path


def _generator(scenario_state: ScenarioState) -> ShowcaseGenerator:
    base_dir = typ.cast("Path", scenario_state["base_dir"])
    return ShowcaseGenerator("main.css", loader=FileSystemLoader(base_dir))


@when("I build the showcase for the root style-sheet")
def when_build(scenario_state: ScenarioState) -> None:
    """Run the pipeline and keep the resulting items."""
    scenario_state["items"] = _generator(scenario_state).collect()


@when("I try to build the showcase for the root style-sheet")
def when_try_build(scenario_state: ScenarioState) -> None:
    """Run the pipeline and capture the load error."""
    with pytest.raises(LoadError) as excinfo:
        _generator(scenario_state).collect()
    scenario_state["error"] = excinfo.value


def _items(scenario_state: ScenarioState) -> list[ShowcaseItem]:
    return typ.cast("list[ShowcaseItem]", scenario_state["items"])


@then("the items are ordered by section")
def then_ordered(scenario_state: ScenarioState) -> None:
    """Sections sort regardless of which import loaded first."""
    items = _items(scenario_state)
    assert [item.section for item in items] == ["1 Typography", "2 Controls"]
    assert [item.title for item in items] == ["Headings", "Buttons"]


@then("the buttons item has a subitem for the base and each modifier")
def then_subitems(scenario_state: ScenarioState) -> None:
    """One subitem per base and modifier, with selector-derived ids."""
    buttons = _items(scenario_state)[1]
    assert [sub.id for sub in buttons.subitems] == [
        "_btn",
        "_btn_btn-large",
        "_btn_btn-ghost",
    ]
    assert buttons.anchor == "section_2_Controls"


@then("every subitem example carries its modifier classes")
def then_examples(scenario_state: ScenarioState) -> None:
    """Examples include the modifier class and a disabled state block."""
    buttons = _items(scenario_state)[1]
    large = buttons.subitems[1].example.split("\n")
    assert large == [
        '<button class="btn btn-large">Save</button>',
        '<button class="btn btn-large" disabled="disabled">Save</button>',
    ]


@then("a load error naming the missing file is raised")
def then_load_error(scenario_state: ScenarioState) -> None:
    """The error identifies the import that could not be read."""
    error = typ.cast("LoadError", scenario_state["error"])
    assert error.url == "partials/missing.css"
    assert "partials/missing.css" in str(error)
