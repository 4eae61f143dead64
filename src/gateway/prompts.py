# src/gateway/prompts.py - v1
"""Prompt builders for the stylesheet and document-rewrite requests."""

from __future__ import annotations

import re
from collections.abc import Sequence

from stylemorph.core.models import InputFile

_CODE_FENCE = re.compile(r"^```(?:html|css)?\s*([\s\S]*?)\s*```$", re.IGNORECASE)

STYLESHEET_TEMPLATE = """\
You are a world-class UI/UX designer and frontend engineer.

Task: write a single, modern, global CSS stylesheet that redesigns the HTML
documents below according to the user's request.

User request: "{user_prompt}"

Input HTML documents:
{file_contexts}

Requirements:
1. Output ONLY raw CSS. No markdown fences, no explanations.
2. The stylesheet must be responsive and accessible, using Flexbox/Grid.
3. Define the colour palette and typography as custom properties on :root
   (e.g. --primary-color, --text-main) and use them throughout.
4. Prefer child, adjacent and general sibling combinators to keep
   specificity low and the cascade clean.
5. Add smooth transitions for interactive elements (hover and focus on
   links and buttons) and subtle entrance animations for main content.
6. Write selectors that cover the structures seen in the documents.
7. Do not assume any class names exist; style generic elements and the
   class names a rewrite would plausibly introduce.
"""

REWRITE_TEMPLATE = """\
You are a frontend engineering expert.

Task: rewrite the HTML document below so that it uses the global stylesheet
provided.

Goal: apply the user's design intent "{user_prompt}" by restructuring the
HTML to match the stylesheet.

Global stylesheet (reference only):
{stylesheet}

Original HTML document ({file_name}):
{file_content}

Requirements:
1. Output ONLY raw HTML. No markdown fences.
2. Add <link rel="stylesheet" href="{stylesheet_name}"> to the <head>.
3. Remove any existing <style> blocks and inline style attributes.
4. Add classes to elements so they match the stylesheet's selectors.
5. Keep all original text content and images; change structure and
   styling only.
6. Use semantic elements (<header>, <main>, <footer>, <section>, ...).
"""


def format_file_contexts(files: Sequence[InputFile]) -> str:
    """Concatenate documents with numbered name headers."""
    return "\n".join(
        f"--- FILE {i}: {f.name} ---\n{f.content}\n"
        for i, f in enumerate(files, start=1)
    )


def build_stylesheet_prompt(files: Sequence[InputFile], user_prompt: str) -> str:
    return STYLESHEET_TEMPLATE.format(
        user_prompt=user_prompt,
        file_contexts=format_file_contexts(files),
    )


def build_rewrite_prompt(
    file: InputFile,
    stylesheet: str,
    user_prompt: str,
    stylesheet_name: str = "style.css",
) -> str:
    return REWRITE_TEMPLATE.format(
        user_prompt=user_prompt,
        stylesheet=stylesheet,
        file_name=file.name,
        file_content=file.content,
        stylesheet_name=stylesheet_name,
    )


def clean_code_response(text: str) -> str:
    """Strip surrounding whitespace and a single enclosing code fence.

    Only a fence wrapping the whole response is removed; fences in the
    middle of the text are left alone.
    """
    cleaned = text.strip()
    match = _CODE_FENCE.match(cleaned)
    if match:
        cleaned = match.group(1)
    return cleaned
