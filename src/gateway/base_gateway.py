# src/gateway/base_gateway.py - v1
"""Abstract text-generation gateway consumed by the pipeline orchestrator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from stylemorph.core.models import InputFile, ModelDescriptor


class GenerationGateway(ABC):
    """External text-generation service as seen by the orchestrator."""

    @abstractmethod
    async def generate_stylesheet(
        self,
        files: Sequence[InputFile],
        prompt: str,
        model: ModelDescriptor,
    ) -> str:
        """Produce one shared stylesheet for all files.

        Raises:
            GatewayError: On transport or model failure.
        """

    @abstractmethod
    async def rewrite_document(
        self,
        file: InputFile,
        stylesheet: str,
        prompt: str,
        model: ModelDescriptor,
    ) -> str:
        """Rewrite one document to use the shared stylesheet.

        Raises:
            GatewayError: On transport or model failure.
        """

    @abstractmethod
    async def list_local_models(self) -> list[ModelDescriptor]:
        """Best-effort discovery of locally served models. Never raises."""
