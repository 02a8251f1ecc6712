"""The main CLI entrypoint for the workflow sync.

This outlines the main CLI entrypoint objects that are to be used throughout.

:Module: workflow_sync.cli.entrypoint
:License: See the LICENSE file for details
"""

import click

from workflow_sync.cli.components import WorkflowSyncClickGroup, load_configuration_path
from workflow_sync.startup import base_start_up
from workflow_sync.sync import check_workflows, format_report, sync_workflows
from workflow_sync.utils.configuration import WORKFLOW_SYNC_CONFIGURATION
from workflow_sync.utils.logging import LOGGER
from workflow_sync.workflows.checker import is_compatible
from workflow_sync.working_tree import GitWorkingTree


@click.group(cls=WorkflowSyncClickGroup)
@click.option(
    "--config",
    type=click.Path(exists=True),
    required=False,
    callback=load_configuration_path,
    expose_value=False,
    is_eager=True,
    help="A configuration YAML file (or a directory of them) to use instead of the packaged default.",
)
def cli() -> None:
    """Syncs the starter workflows that are compatible with GHES over to the GHES branch."""
    base_start_up()


@cli.command()
def check() -> None:
    """Reports which starter workflows are compatible with GHES. This doesn't change anything."""
    configuration = WORKFLOW_SYNC_CONFIGURATION.sync_configuration
    result = check_workflows(configuration.folders, configuration.enabled_actions, icons_enabled=configuration.icons_enabled)
    click.echo(format_report(result))


@cli.command()
@click.argument("workflow_file", type=click.Path(exists=True, dir_okay=False))
def check_workflow(workflow_file: str) -> None:
    """Checks if a single workflow file is compatible with GHES. Exits with 2 if it isn't."""
    configuration = WORKFLOW_SYNC_CONFIGURATION.sync_configuration
    if is_compatible(workflow_file, configuration.enabled_actions):
        click.echo(f"{workflow_file} is compatible with GHES.")
        return

    click.echo(f"{workflow_file} is NOT compatible with GHES.")
    raise click.exceptions.Exit(2)


@cli.command()
@click.option("--commit", is_flag=True, default=False, show_default=True, help="Must be supplied for changes to be made to the working tree")
def sync(commit: bool) -> None:
    """
    Checks the workflows, switches to the target branch, removes all the workflows, and then restores the compatible ones from the source branch.

    Nothing is committed: the changes are left in the working tree.
    """
    if not commit:
        LOGGER.warning("[⚠️] Commit flag is disabled: not changing anything in the working tree!")

    sync_workflows(WORKFLOW_SYNC_CONFIGURATION.sync_configuration, GitWorkingTree(), commit=commit)
    LOGGER.info("[✅] Done!")
