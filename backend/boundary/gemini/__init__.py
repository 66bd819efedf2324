"""Google Gemini boundary."""

from backend.boundary.gemini.gemini_client import GeminiContentClient

__all__ = ["GeminiContentClient"]
