# src/llm/adapters/google_adapter.py - v1
"""Google Gemini adapter implementing BaseLLMClient.

Uses the google-generativeai SDK. System-role messages are folded into the
model's system instruction; a response without text (for example one
stopped by a safety filter) is raised as an error rather than returned empty.
"""

from __future__ import annotations

import time
from typing import Any

from stylemorph.llm.base_client import BaseLLMClient
from stylemorph.llm.models import LLMResponse, Message


class EmptyCompletionError(RuntimeError):
    """Gemini returned no usable text."""


class GoogleAdapter(BaseLLMClient):
    """Google Gemini adapter."""

    def __init__(self, model: str = "gemini-2.5-flash", api_key: str = "", **kwargs: Any):
        self._model = model
        self._api_key = api_key

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 8192,
        temperature: float = 0.7,
    ) -> LLMResponse:
        import google.generativeai as genai

        instructions = [system] if system else []
        contents: list[dict[str, Any]] = []
        for m in messages:
            if m.role == "system":
                instructions.append(m.content)
                continue
            role = "model" if m.role == "assistant" else "user"
            contents.append({"role": role, "parts": [{"text": m.content}]})

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(
            self._model,
            system_instruction="\n\n".join(instructions) or None,
        )

        t0 = time.monotonic()
        resp = await model.generate_content_async(
            contents,
            generation_config={
                "max_output_tokens": max_tokens,
                "temperature": temperature,
            },
        )
        latency = int((time.monotonic() - t0) * 1000)

        usage = getattr(resp, "usage_metadata", None)
        return LLMResponse(
            content=_response_text(resp, self._model),
            input_tokens=getattr(usage, "prompt_token_count", 0) if usage else 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) if usage else 0,
            model=self._model,
            provider="google",
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "google"


def _response_text(resp: Any, model: str) -> str:
    # The SDK raises ValueError from .text when no candidate has parts.
    try:
        text = resp.text
    except ValueError as e:
        feedback = getattr(resp, "prompt_feedback", None)
        reason = getattr(feedback, "block_reason", None) if feedback else None
        raise EmptyCompletionError(
            f"{model} returned no text" + (f" (blocked: {reason})" if reason else "")
        ) from e
    if not text:
        raise EmptyCompletionError(f"{model} returned an empty response")
    return text
