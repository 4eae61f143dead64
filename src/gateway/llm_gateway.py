# src/gateway/llm_gateway.py - v1
"""GenerationGateway backed by the provider adapters in stylemorph.llm.

One client is created per request from the model the user selected, so a
single gateway serves both cloud and local models.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from stylemorph.config.settings import Settings
from stylemorph.core.errors import GatewayError
from stylemorph.core.models import InputFile, ModelDescriptor
from stylemorph.gateway.base_gateway import GenerationGateway
from stylemorph.gateway.prompts import (
    build_rewrite_prompt,
    build_stylesheet_prompt,
    clean_code_response,
)
from stylemorph.llm.adapters.ollama_adapter import list_ollama_models
from stylemorph.llm.base_client import BaseLLMClient
from stylemorph.llm.client_factory import create_llm_client
from stylemorph.llm.models import Message

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., BaseLLMClient]


class LLMGenerationGateway(GenerationGateway):
    """Gateway that prompts an LLM provider for each generation step.

    Args:
        settings: Application settings (keys, hosts, sampling).
        client_factory: Callable(provider, model, settings) -> BaseLLMClient.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = create_llm_client,
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory

    async def generate_stylesheet(
        self,
        files: Sequence[InputFile],
        prompt: str,
        model: ModelDescriptor,
    ) -> str:
        request = build_stylesheet_prompt(files, prompt)
        try:
            text = await self._complete(model, request)
        except Exception as e:
            logger.error("Stylesheet generation failed with %s: %s", model.id, e)
            raise GatewayError(
                f"Failed to generate global stylesheet using {model.name}."
            ) from e
        return clean_code_response(text)

    async def rewrite_document(
        self,
        file: InputFile,
        stylesheet: str,
        prompt: str,
        model: ModelDescriptor,
    ) -> str:
        request = build_rewrite_prompt(
            file, stylesheet, prompt,
            stylesheet_name=self._settings.stylesheet_file_name,
        )
        try:
            text = await self._complete(model, request)
        except Exception as e:
            logger.error("Rewriting %s failed with %s: %s", file.name, model.id, e)
            raise GatewayError(f"Failed to rewrite {file.name}.") from e
        return clean_code_response(text)

    async def list_local_models(self) -> list[ModelDescriptor]:
        try:
            names = await list_ollama_models(self._settings.ollama_base_url)
        except Exception as e:
            logger.warning(
                "Could not list Ollama models at %s: %s",
                self._settings.ollama_base_url, e,
            )
            return []
        return [ModelDescriptor(id=n, name=n, provider="ollama") for n in names]

    async def _complete(self, model: ModelDescriptor, request: str) -> str:
        client = self._client_factory(model.provider, model.id, self._settings)
        response = await client.complete(
            [Message(role="user", content=request)],
            max_tokens=self._settings.llm_max_tokens,
            temperature=self._settings.llm_temperature,
        )
        logger.debug(
            "%s/%s answered in %dms (%d output tokens)",
            response.provider, response.model,
            response.latency_ms, response.output_tokens,
        )
        return response.content
