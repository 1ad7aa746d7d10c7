"""Jira AI field enrichment service."""

__version__ = "1.1.0"
