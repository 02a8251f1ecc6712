"""The workflow compatibility checker

This checks if a workflow only makes use of actions that are enabled on GHES.

:Module: workflow_sync.workflows.checker
:License: See the LICENSE file for details
"""
from typing import Any, Iterable, Optional

import yaml
from marshmallow import ValidationError

from workflow_sync.utils.logging import LOGGER
from workflow_sync.workflows.schemas import Workflow, WorkflowSchema


class WorkflowParseError(Exception):
    """Raised if a workflow file can't be read or doesn't look like a workflow."""

    def __init__(self, workflow_path: str, reason: Any):
        super().__init__(workflow_path, reason)
        self.workflow_path = workflow_path
        self.reason = reason

    def __str__(self) -> str:
        return f"Unable to load the workflow at {self.workflow_path}: {self.reason}"


def load_workflow(workflow_path: str) -> Workflow:
    """Reads and parses the workflow YAML file."""
    try:
        with open(workflow_path, "r", encoding="utf-8") as stream:
            loaded = yaml.safe_load(stream)

    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise WorkflowParseError(workflow_path, exc) from exc

    try:
        return WorkflowSchema().load(loaded)

    except ValidationError as verr:
        raise WorkflowParseError(workflow_path, verr.messages) from verr


def get_action_name(uses: str) -> str:
    """Returns the action name without the version: `actions/checkout@v3` -> `actions/checkout`"""
    return uses.split("@", 1)[0]


def find_disallowed_action(workflow: Workflow, allowed_actions: Iterable[str]) -> Optional[str]:
    """Returns the name of the first action in the workflow that is not in the allowed actions (case-insensitive). None if they are all allowed."""
    allowed = {action.lower() for action in allowed_actions}

    for uses in workflow.action_references():
        action_name = get_action_name(uses)
        if action_name.lower() not in allowed:
            return action_name

    return None


def is_compatible(workflow_path: str, allowed_actions: Iterable[str]) -> bool:
    """
    Check if a workflow only uses the given set of actions.

    A workflow that can't be read or parsed is treated as incompatible.
    """
    try:
        workflow = load_workflow(workflow_path)

    except WorkflowParseError as wpe:
        LOGGER.error(f"[💥] Error while checking workflow: {wpe}. Treating it as incompatible.")
        return False

    disallowed = find_disallowed_action(workflow, allowed_actions)
    if disallowed is not None:
        LOGGER.info(f"[🚫] Workflow {workflow_path} uses '{disallowed}' which is not supported for GHES.")
        return False

    # All used actions are enabled:
    return True
