from pydantic import BaseModel
from typing import List, Literal

from proxy_core import settings


class PromptIn(BaseModel):
    prompt: str


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    model: str = settings.MODEL
    messages: List[ChatMessage]
    temperature: float = settings.TEMPERATURE
    max_tokens: int = settings.MAX_TOKENS

    @classmethod
    def for_prompt(cls, system_prompt: str, prompt: str) -> "ChatCompletionRequest":
        return cls(messages=[
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=prompt),
        ])


class ProxyOut(BaseModel):
    response: str


class ErrorOut(BaseModel):
    error: str
