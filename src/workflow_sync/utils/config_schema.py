"""The workflow sync configuration schema

This defines the Marshmallow schemas for the workflow sync configuration. This will ensure that the configuration file
has the correct components on it, and it loads the sync section into the `SyncConfiguration` object that is passed into the sync logic.

:Module: workflow_sync.utils.config_schema
:License: See the LICENSE file for details
"""
from typing import Any, Dict, List, Optional

from marshmallow import Schema, fields, INCLUDE, post_load, validate, validates_schema, ValidationError


class SyncConfiguration:
    """The loaded and validated sync configuration. This is what the sync orchestrator operates on."""

    def __init__(
        self,
        folders: List[str],
        enabled_actions: List[str],
        source_ref: str,
        target_ref: str,
        icons_directory: Optional[str] = None,
    ):
        self.folders = folders
        self.enabled_actions = enabled_actions
        self.source_ref = source_ref
        self.target_ref = target_ref
        self.icons_directory = icons_directory

    @property
    def icons_enabled(self) -> bool:
        """Icons are only synced if an icons directory is configured."""
        return bool(self.icons_directory)


class WorkflowSyncSchema(Schema):
    """This is the main schema for the workflow sync itself."""

    # Required Fields:
    # The directories (relative to the working directory) that contain the starter workflows:
    folders = fields.List(fields.String(validate=validate.Length(min=1)), required=True, validate=validate.Length(min=1), data_key="Folders")
    # The actions that are available on GHES. Matching is case-insensitive and ignores the `@ref` suffix:
    enabled_actions = fields.List(fields.String(validate=validate.Length(min=1)), required=True, data_key="EnabledActions")

    # Optional fields:
    # The branch that the compatible workflows are restored from:
    source_ref = fields.String(required=False, load_default="main", validate=validate.Length(min=1), data_key="SourceRef")
    # The branch that gets the compatible workflows:
    target_ref = fields.String(required=False, load_default="ghes", validate=validate.Length(min=1), data_key="TargetRef")
    # If set, then each workflow's icon (from its properties file) is synced from this shared directory:
    icons_directory = fields.String(required=False, load_default=None, allow_none=True, data_key="IconsDirectory")

    # Log Level:
    log_level = fields.String(
        required=False, load_default="INFO", validate=validate.OneOf({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}), data_key="LogLevel"
    )
    # Dictionary to override log levels for 3rd party loggers. This is the name of the log and the level.
    third_party_logger_levels = fields.Dict(required=False, data_key="ThirdPartyLoggerLevels")

    @validates_schema
    def verify_schema(self, data: Dict[str, Any], **kwargs) -> None:  # pylint: disable=unused-argument  # noqa
        """
        This validates that the schema is correct. At present, this is going to validate:
        1. That the source and target refs are not the same thing
        2. That the icons directory is not also one of the workflow folders (it would be wiped and then partially restored twice)
        """
        errors = {}
        if data.get("source_ref") and data.get("source_ref") == data.get("target_ref"):
            errors["TargetRef"] = ["The TargetRef must be different from the SourceRef."]

        if data.get("icons_directory") and data["icons_directory"] in data.get("folders", []):
            errors["IconsDirectory"] = ["The IconsDirectory cannot also be one of the Folders."]

        if errors:
            raise ValidationError(errors)

    @post_load
    def make_sync_configuration(self, in_data: Dict[str, Any], **kwargs) -> SyncConfiguration:  # pylint: disable=W0613
        """Returns the SyncConfiguration object for the loaded section."""
        return SyncConfiguration(
            in_data["folders"],
            in_data["enabled_actions"],
            in_data["source_ref"],
            in_data["target_ref"],
            icons_directory=in_data.get("icons_directory"),
        )


class BaseConfigurationSchema(Schema):
    """The base configuration Schema for the workflow sync"""

    # Required fields:
    workflow_sync = fields.Nested(WorkflowSyncSchema, required=True, data_key="WORKFLOW_SYNC")

    class Meta:
        """Meta properties on the Schema used by Marshmallow"""

        unknown = INCLUDE  # It's totally OK and normal if we get values that are not in this schema -- we only care that we got the required values
