"""GHES starter workflow sync

Keeps the GHES branch's starter workflows in sync with the main branch, restricted to the workflows that only make use of actions
that are available on GitHub Enterprise Server.

:Module: workflow_sync
:License: See the LICENSE file for details
"""
