"""Workflow loading and GHES compatibility checking.

:Module: workflow_sync.workflows
:License: See the LICENSE file for details
"""
from workflow_sync.workflows.checker import is_compatible, load_workflow, WorkflowParseError  # noqa: F401
