"""Manage OpenAPI document references in a Python project."""
