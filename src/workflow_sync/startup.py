"""The main module for the workflow sync's startup.

This contains the basic code for startup. All CLI invocations will need to execute this.

:Module: workflow_sync.startup
:License: See the LICENSE file for details
"""

from workflow_sync.utils.logging import LOGGER  # noqa pylint: disable=W0611
from workflow_sync.utils.configuration import WORKFLOW_SYNC_CONFIGURATION


def base_start_up() -> None:
    """This is a function that will execute all startup related tasks that needs to be performed for the sync to function.

    The start-up order is as follows:
    1. Load the base configuration
    2. Set up the logger (done by the configuration loader)
    """
    WORKFLOW_SYNC_CONFIGURATION.config  # noqa pylint: disable=pointless-statement
