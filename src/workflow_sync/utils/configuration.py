"""The workflow sync configuration loader and manager

This makes use of YAML files in a very simple, but naive manner. This will simply load all YAML files into a dictionary, validate it,
and then hand out the `SyncConfiguration` object that is passed into the sync logic.

The configuration path is either a directory (all `*.yaml` files in it are merged) or a single YAML file.

:Module: workflow_sync.utils.configuration
:License: See the LICENSE file for details
"""

import logging
import os
from typing import Any, Dict, List

import yaml

from workflow_sync.utils.config_schema import BaseConfigurationSchema, SyncConfiguration, WorkflowSyncSchema
from workflow_sync.utils.logging import LOGGER
import workflow_sync

CONFIGURATION_FILE_DIR_NAME = "configuration_files"
PRE_LOGGER_LEVEL = os.environ.get("PRE_LOGGER_LEVEL", "INFO")


class BadConfigurationError(Exception):
    """Exception for bad workflow sync configuration"""


class WorkflowSyncConfigurationLoader:
    """Class that loads the workflow sync configuration files."""

    # Defined here for testability purposes:
    _configuration_path = f"{workflow_sync.__path__[0]}/{CONFIGURATION_FILE_DIR_NAME}"

    def __init__(self):
        self._app_config: Dict[str, Any] = None  # noqa
        self._sync_configuration: SyncConfiguration = None  # noqa

    def use_configuration_path(self, path: str) -> None:
        """Points the loader to a different configuration file or directory. The configuration is re-loaded on the next access."""
        self._configuration_path = path
        self._app_config = None
        self._sync_configuration = None

    def _find_configuration_files(self) -> List[str]:
        """Returns the YAML files to load. If the configuration path is a file, then that is the only one."""
        if os.path.isfile(self._configuration_path):
            return [self._configuration_path]

        return [f"{self._configuration_path}/{file}" for file in sorted(os.listdir(self._configuration_path)) if file.endswith(".yaml")]

    def load_base_configuration(self) -> None:
        """This will load the base configuration for the application."""
        self._app_config = {}

        # Set up the pre-logger, which is a logger that exists before we have a proper logger set up as we have not yet loaded a configuration!
        LOGGER.setLevel(PRE_LOGGER_LEVEL)
        LOGGER.debug(f"[📄] Loading the base configuration from {self._configuration_path}...")

        try:
            for file in self._find_configuration_files():
                LOGGER.debug(f"[⚙️] Processing configuration file: {file}...")

                with open(file, "r", encoding="utf-8") as stream:
                    loaded = yaml.safe_load(stream)

                self._app_config.update(loaded or {})

                LOGGER.debug(f"[⚙️] Successfully loaded configuration file: {file}")

        except Exception as exc:
            LOGGER.error("[💥] Major error encountered loading configuration. Cannot proceed.")
            LOGGER.exception(exc)
            raise

        # Verify that the required components are in the configuration:
        try:
            errors = BaseConfigurationSchema().validate(self._app_config)
            if errors:
                raise BadConfigurationError(errors)

        except BadConfigurationError as bce:
            LOGGER.error("[💥] The workflow sync configuration is invalid. See the stacktrace for more details.")
            LOGGER.exception(bce)
            raise

        self._sync_configuration = WorkflowSyncSchema().load(self._app_config["WORKFLOW_SYNC"])

        LOGGER.debug("[🪵] Configuring the logger for the rest of the application...")

        # Now, configure the logger from the loaded configuration:
        LOGGER.setLevel(self._app_config["WORKFLOW_SYNC"].get("LogLevel", PRE_LOGGER_LEVEL))

        # Update the third_party_logger_levels if specified:
        for logger_name, level in self._app_config["WORKFLOW_SYNC"].get("ThirdPartyLoggerLevels", {}).items():
            logging.getLogger(logger_name).setLevel(level)

        LOGGER.debug("[🆗️] Base configuration loaded successfully")

    @property
    def config(self) -> Dict[str, Any]:
        """Lazy-loads the application configuration. If not already loaded it will load the base configuration and then return it."""
        if not self._app_config:
            self.load_base_configuration()

        return self._app_config

    @property
    def sync_configuration(self) -> SyncConfiguration:
        """Returns the validated sync configuration object, lazy-loading the configuration if needed."""
        if not self._sync_configuration:
            self.load_base_configuration()

        return self._sync_configuration


WORKFLOW_SYNC_CONFIGURATION = WorkflowSyncConfigurationLoader()
