"""The workflow sync CLI.

:Module: workflow_sync.cli
:License: See the LICENSE file for details
"""
