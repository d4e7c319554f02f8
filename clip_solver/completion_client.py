"""Chat-completion client for the OpenAI HTTP API."""

import logging
from abc import ABC, abstractmethod

import requests
from pydantic import ValidationError

from clip_solver.config import MODEL, OPENAI_URL, SYSTEM_PROMPT
from clip_solver.exceptions import CompletionError
from clip_solver.models import CompletionRequest, CompletionResponse, Message

logger = logging.getLogger("completion_client")


class CompletionProvider(ABC):
    """Turns a prompt into an answer."""

    @abstractmethod
    def complete(self, prompt: str, api_key: str) -> str:
        """Return the model's answer to ``prompt``.

        Raises:
            CompletionError: If the request fails or the reply can't be parsed.
        """
        ...


class OpenAICompletionClient(CompletionProvider):
    def __init__(self, url=OPENAI_URL, model=MODEL, system_prompt=SYSTEM_PROMPT):
        self.url = url
        self.model = model
        self.system_prompt = system_prompt

    def build_request(self, prompt: str) -> CompletionRequest:
        return CompletionRequest(
            model=self.model,
            messages=[
                Message(role="system", content=self.system_prompt),
                Message(role="user", content=prompt),
            ],
        )

    def complete(self, prompt: str, api_key: str) -> str:
        payload = self.build_request(prompt).model_dump()
        try:
            response = requests.post(
                self.url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {api_key}",
                },
            )
        except requests.RequestException as e:
            raise CompletionError("Request to completion endpoint failed", original_error=e) from e

        if not 200 <= response.status_code < 300:
            logger.debug(f"Completion endpoint returned {response.status_code}")
            raise CompletionError(
                f"error: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            parsed = CompletionResponse.model_validate_json(response.text)
        except ValidationError as e:
            raise CompletionError(
                "Malformed completion response",
                original_error=e,
                status_code=response.status_code,
                body=response.text,
            ) from e
        return parsed.first_answer()
