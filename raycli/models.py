from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    """OpenAI-compatible chat-completion request body."""

    model: str
    messages: List[ChatMessage]
    frequency_penalty: float = 0
    max_tokens: int = 2048
    presence_penalty: float = 0
    response_format: Dict[str, str] = Field(default_factory=lambda: {"type": "text"})
    stop: Optional[List[str]] = None
    stream: bool = False
    stream_options: Optional[Dict[str, Any]] = None
    temperature: float = 1
    top_p: float = 1
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: str = "none"
    logprobs: bool = False
    top_logprobs: Optional[int] = None

    @classmethod
    def for_prompt(cls, model: str, prompt: str) -> "CompletionRequest":
        return cls(model=model, messages=[ChatMessage(role="user", content=prompt)])


class ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    content: Optional[str] = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: Optional[ResponseMessage] = None
    finish_reason: Optional[str] = None


class CompletionResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[Choice]
