"""Components for the CLI to make it function properly.

These are pulled out here to make it easy to test and avoid circular dependencies.

:Module: workflow_sync.cli.components
:License: See the LICENSE file for details
"""
from typing import Any, Optional

import click
from click import Context, Parameter

from workflow_sync.utils.configuration import WORKFLOW_SYNC_CONFIGURATION
from workflow_sync.utils.logging import LOGGER


BANNER = """
 __      __       _    __ _                 ___
 \\ \\    / /__ _ _| |__/ _| |_____ __ __  / __|_  _ _ _  __
  \\ \\/\\/ / _ \\ '_| / /  _| / _ \\ V  V /  \\__ \\ || | ' \\/ _|
   \\_/\\_/\\___/_| |_\\_\\_| |_\\___/\\_/\\_/   |___/\\_, |_||_\\__|
                                                 |__/
"""


def load_configuration_path(ctx: Context, param: Parameter, value: Optional[str]) -> Optional[str]:  # pylint: disable=W0613  # noqa
    """This is a click callback for the `--config` option. It points the configuration loader to the supplied file or directory:

    @click.option("--config", type=click.Path(exists=True), callback=load_configuration_path, expose_value=False)
    """
    if value:
        WORKFLOW_SYNC_CONFIGURATION.use_configuration_path(value)

    return value


class WorkflowSyncClickGroup(click.Group):
    """The workflow sync Click Group. This prints the banner and makes sure that any unhandled error results in exit code 1."""

    def invoke(self, ctx: Context) -> Any:
        """Wrap the invocation so that unhandled errors are logged before exiting."""
        click.echo(BANNER)

        try:
            return super().invoke(ctx)

        except (click.exceptions.Exit, click.exceptions.Abort, click.ClickException):
            raise

        except Exception as exc:  # pylint: disable=broad-except
            LOGGER.error("[💥] Unhandled error while syncing workflows. See the stacktrace for more details.")
            LOGGER.exception(exc)
            ctx.exit(1)
