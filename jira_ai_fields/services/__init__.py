"""Service layer: Jira client, scoring strategies and batch orchestration."""
