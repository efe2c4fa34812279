"""Pydantic models for the chat API and agent contracts."""
from pydantic import BaseModel, Field

from .base import CamelModel

class ChatRequest(CamelModel):
    message: str = Field(min_length=1)
    branch_id: int

class AgentResult(BaseModel):
    agent: str
    intent: str
    text: str
