"""Logic for syncing the GHES compatible starter workflows

This checks all the starter workflows in the configured folders, and then replaces the workflows on the GHES branch with
only the ones that are compatible.

In order to sync from the source branch, we might need to remove some workflows, add some, and modify others. The lazy approach is to delete
all workflows first, and then just bring the compatible ones over from the source branch. We let git figure out whether it's a deletion,
add, or modify. The result is left in the working tree to be committed.

:Module: workflow_sync.sync
:License: See the LICENSE file for details
"""
import json
import os
from typing import Iterable, List, Optional

import click

from workflow_sync.utils.config_schema import SyncConfiguration
from workflow_sync.utils.logging import LOGGER
from workflow_sync.workflows.checker import is_compatible
from workflow_sync.working_tree import GitWorkingTree

PROPERTIES_DIR_NAME = "properties"


class MissingWorkflowPropertiesError(Exception):
    """Raised if a workflow's properties file is missing or doesn't have an icon name when icons are being synced."""


class WorkflowDescriptor:
    """Identifies a starter workflow: the folder it's in, its ID (the file name without the extension), and its icon if we care about icons."""

    def __init__(self, folder: str, workflow_id: str, file_name: str, icon_name: Optional[str] = None):
        self.folder = folder
        self.workflow_id = workflow_id
        self.file_name = file_name
        self.icon_name = icon_name

    @property
    def display_name(self) -> str:
        """The name used in the report: `folder/id`"""
        return f"{self.folder}/{self.workflow_id}"

    @property
    def workflow_path(self) -> str:
        """Path to the workflow YAML."""
        return os.path.join(self.folder, self.file_name)

    @property
    def properties_path(self) -> str:
        """Path to the workflow's properties JSON."""
        return get_properties_path(self.folder, self.workflow_id)

    def __repr__(self) -> str:
        return f"WorkflowDescriptor({self.display_name!r}, icon_name={self.icon_name!r})"


class WorkflowsCheckResult:
    """The workflows split into the compatible and the incompatible ones."""

    def __init__(self):
        self.compatible_workflows: List[WorkflowDescriptor] = []
        self.incompatible_workflows: List[WorkflowDescriptor] = []


def get_properties_path(folder: str, workflow_id: str) -> str:
    """Returns the path to the properties file for the given workflow."""
    return os.path.join(folder, PROPERTIES_DIR_NAME, f"{workflow_id}.properties.json")


def load_icon_name(folder: str, workflow_id: str) -> str:
    """Reads the icon name out of the workflow's properties file."""
    properties_path = get_properties_path(folder, workflow_id)

    try:
        with open(properties_path, "r", encoding="utf-8") as file:
            properties = json.load(file)

    except (OSError, ValueError) as exc:
        LOGGER.error(f"[💥] Unable to read the properties file for workflow: {folder}/{workflow_id}.")
        raise MissingWorkflowPropertiesError(f"Unable to read {properties_path}: {exc}") from exc

    icon_name = properties.get("iconName") if isinstance(properties, dict) else None
    if not icon_name:
        LOGGER.error(f"[💥] The properties file for workflow: {folder}/{workflow_id} has no iconName.")
        raise MissingWorkflowPropertiesError(f"{properties_path} does not have an iconName.")

    return icon_name


def check_workflows(folders: Iterable[str], enabled_actions: List[str], icons_enabled: bool = False) -> WorkflowsCheckResult:
    """
    Checks all the workflow files that are directly in the given folders. Subdirectories (like `properties/`) are skipped.

    Every workflow file ends up in exactly one of the compatible or incompatible lists.
    """
    result = WorkflowsCheckResult()

    for folder in folders:
        LOGGER.debug(f"[📂] Checking workflows in: {folder}...")
        file_names = sorted(name for name in os.listdir(folder) if os.path.isfile(os.path.join(folder, name)))

        for file_name in file_names:
            workflow_id = os.path.splitext(file_name)[0]
            enabled = is_compatible(os.path.join(folder, file_name), enabled_actions)

            icon_name = load_icon_name(folder, workflow_id) if icons_enabled else None
            workflow_desc = WorkflowDescriptor(folder, workflow_id, file_name, icon_name=icon_name)

            if enabled:
                result.compatible_workflows.append(workflow_desc)
            else:
                result.incompatible_workflows.append(workflow_desc)

    return result


def format_report(result: WorkflowsCheckResult) -> str:
    """Returns the human-readable summary of the check result."""
    lines = [f"Found {len(result.compatible_workflows)} starter workflows compatible with GHES:"]
    lines.extend(f"  {workflow.display_name}" for workflow in result.compatible_workflows)

    lines.append(f"Ignored {len(result.incompatible_workflows)} starter workflows incompatible with GHES:")
    lines.extend(f"  {workflow.display_name}" for workflow in result.incompatible_workflows)

    return "\n".join(lines)


def get_restore_paths(result: WorkflowsCheckResult, icons_directory: Optional[str] = None) -> List[str]:
    """The paths to restore from the source branch: the workflow file, its properties, and its icon if icons are synced."""
    paths = []
    for workflow in result.compatible_workflows:
        paths.append(workflow.workflow_path)
        paths.append(workflow.properties_path)

        if icons_directory:
            paths.append(os.path.join(icons_directory, f"{workflow.icon_name}.svg"))

    return paths


def sync_workflows(configuration: SyncConfiguration, working_tree: GitWorkingTree, commit: bool = False) -> WorkflowsCheckResult:
    """
    Checks the workflows and then syncs the compatible ones to the target branch.

    If `commit` is not set then this only reports on what would have been done.
    """
    # Step 1: Check the workflows (this is done on whatever is currently checked out, which should be the source branch):
    result = check_workflows(configuration.folders, configuration.enabled_actions, icons_enabled=configuration.icons_enabled)
    click.echo(format_report(result))

    # Step 2: Figure out what needs to be removed and restored:
    remove_paths = list(configuration.folders)
    if configuration.icons_enabled:
        remove_paths.append(configuration.icons_directory)
    restore_paths = get_restore_paths(result, icons_directory=configuration.icons_directory)

    if not commit:
        LOGGER.info("[⏭️] Commit is not enabled so not touching the working tree.")
        LOGGER.info(f"[📝] Would switch to {configuration.target_ref}, remove: {', '.join(remove_paths)}")
        LOGGER.info(f"[📝] Would restore {len(restore_paths)} file(s) from {configuration.source_ref}.")
        return result

    # Step 3: Switch to the target branch:
    LOGGER.info(f"[🔀] Switching to the {configuration.target_ref} branch...")
    working_tree.switch_to(configuration.target_ref)

    # Step 4: Remove all the workflows:
    LOGGER.info("[🗑️] Removing all workflows...")
    working_tree.remove_paths(remove_paths)

    # Step 5: Bring the compatible workflows back from the source branch:
    if restore_paths:
        LOGGER.info(f"[⬇️] Syncing {len(result.compatible_workflows)} compatible workflow(s) from {configuration.source_ref}...")
        working_tree.restore_paths(configuration.source_ref, restore_paths)
    else:
        LOGGER.warning("[🤷] There are no compatible workflows to sync.")

    return result
