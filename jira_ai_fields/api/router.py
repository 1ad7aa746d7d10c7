from fastapi import APIRouter

from jira_ai_fields.api.v1 import tickets

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(tickets.router)
