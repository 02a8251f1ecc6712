"""Main setup file for workflow-sync

This project is using the modern pyproject.toml format and this file is only required for running:
``pip install -e .``

:Module: setup
"""
from setuptools import setup

setup()
