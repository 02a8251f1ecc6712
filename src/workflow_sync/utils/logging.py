"""Logging for workflow sync

Everything in the package logs through `LOGGER`. Messages go to stderr with the source location appended, so a CI log
of a sync run shows exactly which check skipped which workflow.

:Module: workflow_sync.utils.logging
:License: See the LICENSE file for details
"""
import logging

LOGGER = logging.getLogger("workflow_sync")

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s - %(pathname)s - %(funcName)s:%(lineno)i"))
LOGGER.addHandler(handler)

# Our handler is the only one that should print these:
LOGGER.propagate = False

# No level is set here. `LogLevel` and `ThirdPartyLoggerLevels` (e.g. for GitPython's `git` logger) are applied when the configuration loads.
