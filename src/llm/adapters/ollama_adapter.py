# src/llm/adapters/ollama_adapter.py - v1
"""Ollama local LLM adapter implementing BaseLLMClient.

Uses the ollama Python SDK against a local Ollama server.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from stylemorph.llm.base_client import BaseLLMClient
from stylemorph.llm.models import LLMResponse, Message

logger = logging.getLogger(__name__)


class OllamaAdapter(BaseLLMClient):
    """Ollama local inference adapter."""

    def __init__(
        self, model: str = "llama3", host: str = "http://127.0.0.1:11434", **kwargs: Any,
    ):
        self._model = model
        self._host = host

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 8192,
        temperature: float = 0.7,
    ) -> LLMResponse:
        import ollama

        client = ollama.AsyncClient(host=self._host)
        msgs: list[dict[str, str]] = []
        if system:
            msgs.append({"role": "system", "content": system})
        for m in messages:
            msgs.append({"role": m.role, "content": m.content})

        options: dict[str, Any] = {
            "num_predict": max_tokens,
            "temperature": temperature,
        }

        t0 = time.monotonic()
        resp = await client.chat(
            model=self._model, messages=msgs, options=options, stream=False,
        )
        latency = int((time.monotonic() - t0) * 1000)

        return LLMResponse(
            content=resp["message"]["content"],
            input_tokens=resp.get("prompt_eval_count") or 0,
            output_tokens=resp.get("eval_count") or 0,
            model=self._model,
            provider="ollama",
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "ollama"


async def list_ollama_models(host: str) -> list[str]:
    """Return the names of models installed on an Ollama server.

    Raises whatever the ollama client raises; callers decide how to degrade.
    """
    import ollama

    client = ollama.AsyncClient(host=host)
    resp = await client.list()
    names: list[str] = []
    for entry in resp["models"]:
        name = entry.get("model") or entry.get("name")
        if name:
            names.append(name)
    logger.debug("Ollama at %s reports %d models", host, len(names))
    return names
