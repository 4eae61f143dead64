# src/templates/catalog.py - v1
"""Style template catalog: built-in and user-authored style requests.

Every mutation writes the full catalog back to the key-value store.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from stylemorph.core.errors import (
    PersistenceError,
    TemplateNotEditableError,
    TemplateNotFoundError,
)
from stylemorph.core.models import StyleTemplate
from stylemorph.store.base_store import TEMPLATES_KEY, BaseKeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: tuple[StyleTemplate, ...] = (
    StyleTemplate(
        id="t1",
        name="Dark Mode Minimal",
        prompt="Modern dark mode with sleek typography, high contrast, slate "
        "background, and subtle blue accents.",
        like_count=124,
    ),
    StyleTemplate(
        id="t2",
        name="Corporate Clean",
        prompt="Professional, trustworthy corporate style with navy blue header, "
        "white background, and clean sans-serif fonts.",
        like_count=89,
    ),
    StyleTemplate(
        id="t3",
        name="Neon Cyberpunk",
        prompt="Futuristic cyberpunk aesthetic with neon pink and cyan text, black "
        "background, and glitch effects on hover.",
        like_count=256,
    ),
    StyleTemplate(
        id="t4",
        name="Playful & Brutalist",
        prompt="Bold neo-brutalism with thick black borders, vivid pastel colors, "
        "large typography, and offset shadows.",
        like_count=54,
    ),
)

_TEMPLATES = TypeAdapter(list[StyleTemplate])


class TemplateCatalog:
    """Mutable, persisted list of style templates."""

    def __init__(self, store: BaseKeyValueStore, key: str = TEMPLATES_KEY) -> None:
        self._store = store
        self._key = key
        self._templates: list[StyleTemplate] = _defaults()

    async def load(self) -> list[StyleTemplate]:
        """Load the persisted catalog; built-ins are used if nothing valid is stored."""
        try:
            raw = await self._store.get(self._key)
        except PersistenceError as e:
            logger.warning("Template catalog unavailable: %s", e)
            raw = None

        if raw is None:
            self._templates = _defaults()
        else:
            try:
                self._templates = _TEMPLATES.validate_python(raw)
            except ValidationError as e:
                logger.warning(
                    "Discarding malformed template catalog (%d errors)", e.error_count()
                )
                self._templates = _defaults()
        return self.list()

    def list(self) -> list[StyleTemplate]:
        return [t.model_copy() for t in self._templates]

    def get(self, template_id: str) -> StyleTemplate:
        return self._find(template_id).model_copy()

    def search(self, text: str) -> list[StyleTemplate]:
        """Templates whose name or prompt contains ``text`` (case-insensitive)."""
        needle = text.lower()
        return [
            t.model_copy()
            for t in self._templates
            if needle in t.name.lower() or needle in t.prompt.lower()
        ]

    async def like(self, template_id: str) -> StyleTemplate:
        """Toggle the like flag and adjust the count by one."""
        template = self._find(template_id)
        template.like_count += -1 if template.is_liked else 1
        template.is_liked = not template.is_liked
        await self._persist()
        return template.model_copy()

    async def rename(self, template_id: str, name: str) -> StyleTemplate:
        template = self._find_editable(template_id)
        template.name = name
        await self._persist()
        return template.model_copy()

    async def delete(self, template_id: str) -> None:
        template = self._find_editable(template_id)
        self._templates.remove(template)
        await self._persist()

    async def save(self, name: str, prompt: str) -> StyleTemplate:
        """Add a user-authored template built from the current prompt."""
        template = StyleTemplate(name=name, prompt=prompt, is_user_authored=True)
        self._templates.append(template)
        await self._persist()
        logger.info("Saved template %r", name)
        return template.model_copy()

    def _find(self, template_id: str) -> StyleTemplate:
        for template in self._templates:
            if template.id == template_id:
                return template
        raise TemplateNotFoundError(f"No template with id {template_id!r}")

    def _find_editable(self, template_id: str) -> StyleTemplate:
        template = self._find(template_id)
        if not template.is_user_authored:
            raise TemplateNotEditableError(
                f"Template {template.name!r} is built in and cannot be changed"
            )
        return template

    async def _persist(self) -> None:
        payload = [t.model_dump(mode="json") for t in self._templates]
        try:
            await self._store.set(self._key, payload)
        except PersistenceError as e:
            logger.error("Failed to persist template catalog: %s", e)


def _defaults() -> list[StyleTemplate]:
    return [t.model_copy() for t in DEFAULT_TEMPLATES]
