"""Tests for the workflow schemas

:Module: workflow_sync.tests.workflows.test_workflow_schemas
:License: See the LICENSE file for details
"""
import pytest
import yaml
from marshmallow import ValidationError

from workflow_sync.workflows.schemas import Job, Step, Workflow, WorkflowSchema


def test_load_workflow_schema() -> None:
    """Tests that the workflow loads into the proper objects and that everything we don't care about is dropped."""
    loaded = yaml.safe_load(
        """
name: CI
on:
  push:
    branches: [ main ]
env:
  FOO: bar
jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - name: Checkout
        uses: actions/checkout@v3
        with:
          fetch-depth: 0
      - run: make
  test:
    needs: build
    steps:
      - uses: actions/setup-python@v4
"""
    )
    assert True in loaded  # YAML turns `on` into True

    workflow = WorkflowSchema().load(loaded)
    assert isinstance(workflow, Workflow)
    assert list(workflow.jobs) == ["build", "test"]
    assert isinstance(workflow.jobs["build"], Job)
    assert all(isinstance(step, Step) for step in workflow.jobs["build"].steps)
    assert [step.uses for step in workflow.jobs["build"].steps] == ["actions/checkout@v3", None]
    assert list(workflow.action_references()) == ["actions/checkout@v3", "actions/setup-python@v4"]


def test_missing_values_are_empty() -> None:
    """Tests that the missing or null jobs, steps, and uses don't cause errors."""
    assert WorkflowSchema().load({}).jobs == {}
    assert WorkflowSchema().load({"jobs": None}).jobs == {}

    workflow = WorkflowSchema().load({"jobs": {"nothing": None, "no_steps": {"runs-on": "ubuntu-latest"}, "null_steps": {"steps": None}}})
    assert list(workflow.jobs) == ["nothing", "no_steps", "null_steps"]
    for job in workflow.jobs.values():
        assert job.steps == []

    assert not list(workflow.action_references())

    # Empty `uses` values are skipped:
    workflow = WorkflowSchema().load({"jobs": {"build": {"steps": [{"uses": None}, {"uses": ""}, {"run": "make"}]}}})
    assert len(workflow.jobs["build"].steps) == 3
    assert not list(workflow.action_references())


def test_invalid_shapes() -> None:
    """Tests that the wrong shapes for the fields we care about are errors."""
    with pytest.raises(ValidationError):
        WorkflowSchema().load(["not", "a", "mapping"])

    with pytest.raises(ValidationError):
        WorkflowSchema().load({"jobs": ["build"]})

    with pytest.raises(ValidationError):
        WorkflowSchema().load({"jobs": {"build": {"steps": "make"}}})

    with pytest.raises(ValidationError):
        WorkflowSchema().load({"jobs": {"build": {"steps": [{"uses": ["actions/checkout@v3"]}]}}})


def test_non_string_job_names() -> None:
    """Job names that YAML loads as something other than a string are kept as-is."""
    workflow = WorkflowSchema().load(yaml.safe_load("jobs:\n  1:\n    steps:\n      - uses: actions/checkout@v3\n  true:\n"))
    assert list(workflow.jobs) == [1, True]
    assert list(workflow.action_references()) == ["actions/checkout@v3"]
