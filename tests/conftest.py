"""
Shared test fixtures and configuration for entire test suite.

Provides: sample source material, sample replies, fake render backends
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio
import json
from datetime import datetime, timezone

import pytest

from backend.core.exceptions import RenderError
from backend.models.study import DiagramCategory, SourceMaterial, UploadedFile

SAMPLE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 100"></svg>'


class ControlledRenderBackend:
    """Render backend whose calls complete only when a test releases them."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}
        self._outcomes: dict[str, str | Exception] = {}

    def gate(self, markup: str) -> asyncio.Event:
        return self._gates.setdefault(markup, asyncio.Event())

    def release(self, markup: str, outcome: str | Exception) -> None:
        self._outcomes[markup] = outcome
        self.gate(markup).set()

    async def render_svg(self, markup: str) -> str:
        self.calls.append(markup)
        await self.gate(markup).wait()
        outcome = self._outcomes[markup]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StaticRenderBackend:
    """Render backend answering immediately: markup containing 'bad' fails."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def render_svg(self, markup: str) -> str:
        self.calls.append(markup)
        if "bad" in markup:
            raise RenderError("Parse error on line 2")
        return SAMPLE_SVG


@pytest.fixture
def text_source() -> SourceMaterial:
    """Provide text-only source material."""
    return SourceMaterial(text="Photosynthesis turns light into chemical energy.")


@pytest.fixture
def uploaded_file() -> UploadedFile:
    """Provide a small uploaded markdown document ('# Notes' in base64)."""
    return UploadedFile(name="notes.md", mime_type="text/markdown", base64_payload="IyBOb3Rlcw==")


@pytest.fixture
def file_and_text_source(uploaded_file: UploadedFile) -> SourceMaterial:
    """Provide source material with both a document and text."""
    return SourceMaterial(text="Focus on chapter 2.", file=uploaded_file)


@pytest.fixture
def generated_at() -> datetime:
    """Provide a fixed generation timestamp."""
    return datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_reply_payload() -> dict:
    """Provide a well-formed generation reply payload."""
    return {
        "summary": "## Photosynthesis\nPlants convert light energy.",
        "diagramMarkup": "mindmap\n  root((Photosynthesis))\n    Light\n    Chlorophyll",
        "flashcards": [
            {"front": "What does photosynthesis produce?", "back": "Glucose and oxygen"},
            {"front": "Where does it happen?", "back": "In the chloroplasts"},
        ],
    }


@pytest.fixture
def sample_reply(sample_reply_payload: dict) -> str:
    """Provide a well-formed generation reply as raw text."""
    return json.dumps(sample_reply_payload)


@pytest.fixture
def category() -> DiagramCategory:
    """Provide the default diagram category."""
    return DiagramCategory.HIERARCHY_MAP


@pytest.fixture
def static_backend() -> StaticRenderBackend:
    """Provide an immediately answering render backend."""
    return StaticRenderBackend()


@pytest.fixture
def controlled_backend() -> ControlledRenderBackend:
    """Provide a render backend released step by step by the test."""
    return ControlledRenderBackend()


@pytest.fixture
def sample_svg() -> str:
    """Provide the SVG returned by the static render backend."""
    return SAMPLE_SVG
