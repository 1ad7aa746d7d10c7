from jira_ai_fields.api.v1 import tickets

__all__ = [
    "tickets",
]
