"""PyTest fixtures for the workflow_sync package.

This defines the PyTest fixtures that can be used by all workflow_sync tests.

:Module: workflow_sync.tests.conftest
:License: See the LICENSE file for details
"""
# pylint: disable=redefined-outer-name,unused-argument
import json
import os
from typing import Any, Callable, Dict, Generator, List

import pytest

from workflow_sync.utils.config_schema import SyncConfiguration

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

ENABLED_ACTIONS = ["actions/checkout", "Actions/Setup-Node"]

NODE_WORKFLOW = """
name: Node.js CI
on:
  push:
    branches: [ $default-branch ]
jobs:
  build:
    runs-on: ubuntu-latest
    strategy:
      matrix:
        node-version: [14.x, 16.x]
    steps:
    - uses: actions/checkout@v3
    - name: Use Node.js ${{ matrix.node-version }}
      uses: actions/setup-node@v2
      with:
        node-version: ${{ matrix.node-version }}
    - run: npm ci
    - run: npm test
"""

CUSTOM_ACTION_WORKFLOW = """
name: Custom
on: [push]
jobs:
  build:
    runs-on: ubuntu-latest
    steps:
    - uses: actions/checkout@v3
    - uses: some-org/custom-action@v1
    - uses: actions/setup-node@v2
"""

NO_JOBS_WORKFLOW = """
name: Nothing to see here
on: [push]
"""

STALE_WORKFLOW = """
name: Mark stale issues and pull requests
on:
  schedule:
  - cron: $cron-daily
jobs:
  stale:
    runs-on: ubuntu-latest
    steps:
    - uses: actions/stale@v3
      with:
        repo-token: ${{ secrets.GITHUB_TOKEN }}
"""

BROKEN_WORKFLOW = """
jobs:
  build:
    steps: [
      - uses: actions/checkout@v3
"""

# folder -> {workflow file name: (contents, icon name)}
WORKFLOW_TREE = {
    "ci": {
        "node.yml": (NODE_WORKFLOW, "nodejs"),
        "custom.yml": (CUSTOM_ACTION_WORKFLOW, "custom"),
        "no-jobs.yml": (NO_JOBS_WORKFLOW, "blank"),
    },
    "automation": {
        "stale.yml": (STALE_WORKFLOW, "stale"),
        "broken.yml": (BROKEN_WORKFLOW, "broken"),
    },
}


@pytest.fixture
def test_configuration() -> Generator[Dict[str, Any], None, None]:
    """Fixture with a test configuration loader for use in unit tests."""
    from workflow_sync.utils.configuration import WORKFLOW_SYNC_CONFIGURATION

    old_value = WORKFLOW_SYNC_CONFIGURATION._configuration_path
    WORKFLOW_SYNC_CONFIGURATION._configuration_path = f"{TESTS_DIR}/test_configuration_files"  # noqa
    WORKFLOW_SYNC_CONFIGURATION._app_config = None
    WORKFLOW_SYNC_CONFIGURATION._sync_configuration = None

    yield WORKFLOW_SYNC_CONFIGURATION.config

    WORKFLOW_SYNC_CONFIGURATION._app_config = None
    WORKFLOW_SYNC_CONFIGURATION._sync_configuration = None
    WORKFLOW_SYNC_CONFIGURATION._configuration_path = old_value


@pytest.fixture
def sync_configuration() -> SyncConfiguration:
    """A sync configuration that lines up with the `workflow_tree` fixture."""
    return SyncConfiguration(["ci", "automation"], ENABLED_ACTIONS, "main", "ghes", icons_directory="icons")


@pytest.fixture
def write_workflow(tmp_path: Any) -> Callable[[str, str], str]:
    """Returns a function that writes out a workflow file to a temporary directory and returns the path to it."""

    def _write_workflow(contents: str, file_name: str = "workflow.yml") -> str:
        path = tmp_path / file_name
        path.write_text(contents, encoding="utf-8")
        return str(path)

    return _write_workflow


@pytest.fixture
def workflow_tree(tmp_path: Any, monkeypatch: Any) -> str:
    """
    Creates a starter workflows repo layout in a temporary directory and changes the working directory to it:
        ci/*.yml, ci/properties/*.properties.json
        automation/*.yml, automation/properties/*.properties.json
        icons/*.svg
    """
    icons_dir = tmp_path / "icons"
    icons_dir.mkdir()

    for folder, workflows in WORKFLOW_TREE.items():
        properties_dir = tmp_path / folder / "properties"
        properties_dir.mkdir(parents=True)

        for file_name, (contents, icon_name) in workflows.items():
            workflow_id = file_name.split(".")[0]
            (tmp_path / folder / file_name).write_text(contents, encoding="utf-8")
            (properties_dir / f"{workflow_id}.properties.json").write_text(
                json.dumps({"name": workflow_id, "description": f"The {workflow_id} workflow", "iconName": icon_name}), encoding="utf-8"
            )
            (icons_dir / f"{icon_name}.svg").write_text("<svg></svg>", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    return str(tmp_path)


@pytest.fixture
def enabled_actions() -> List[str]:
    """The allowed actions used throughout the tests (mixed case on purpose)."""
    return list(ENABLED_ACTIONS)
