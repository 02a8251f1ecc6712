"""Shared utilities: logging and configuration.

:Module: workflow_sync.utils
:License: See the LICENSE file for details
"""
