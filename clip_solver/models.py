from typing import List, Literal, Optional

from pydantic import BaseModel


# Request bodies
class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: Optional[str] = None  # null on refusals


class CompletionRequest(BaseModel):
    model: str
    messages: List[Message]


# Response bodies, only choices[0].message.content is used
class Choice(BaseModel):
    message: Message


class Usage(BaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class CompletionResponse(BaseModel):
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: Optional[List[Choice]] = None
    usage: Optional[Usage] = None

    def first_answer(self) -> str:
        """Content of the first choice, or an empty string when there is none."""
        if self.choices:
            return self.choices[0].message.content or ""
        return ""
