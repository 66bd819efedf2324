"""
Gemini content client.

Sends ServiceRequest segments to Google Gemini and returns the reply text.
The SDK call is blocking, so it runs in a worker thread.

Dependencies: google.genai, backend.models.study, backend.core.exceptions
System role: Generation service boundary
"""

import asyncio
import base64
import binascii
import logging
from functools import lru_cache

from google import genai
from google.genai import types

from backend.core.exceptions import InvalidInputError, MissingCredentialError, ServiceCallError
from backend.models.study import InlineFileSegment, RequestSegment, ServiceRequest
from backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def inline_file_part(mime_type: str, base64_payload: str) -> types.Part:
    """
    Decode an uploaded document into an inline part.

    Cached on the payload itself, so follow-up questions about the same
    document reuse the decoded bytes and a changed document gets a new entry.

    Raises:
        InvalidInputError: If the payload is not valid base64
    """
    try:
        data = base64.b64decode(base64_payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError("Uploaded file is not valid base64", field="file") from e
    return types.Part.from_bytes(data=data, mime_type=mime_type)


def to_part(segment: RequestSegment) -> types.Part:
    """Convert a request segment into a Gemini content part."""
    if isinstance(segment, InlineFileSegment):
        return inline_file_part(segment.mime_type, segment.base64_payload)
    return types.Part.from_text(text=segment.text)


class GeminiContentClient:
    """Thin async wrapper around genai.Client.models.generate_content."""

    def __init__(
        self,
        api_key: str | None,
        model_id: str = "gemini-2.5-flash",
        thinking_budget: int | None = 0,
        client: genai.Client | None = None,
    ) -> None:
        """
        Initialize Gemini content client.

        The SDK client is created lazily so a missing key surfaces on the first
        call instead of at startup.

        Args:
            api_key: Google API key
            model_id: Gemini model ID
            thinking_budget: Thinking budget for JSON generation calls
            client: Optional preconfigured SDK client
        """
        self._api_key = api_key
        self.model_id = model_id
        self.thinking_budget = thinking_budget
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise MissingCredentialError()
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def _build_config(self, request: ServiceRequest) -> types.GenerateContentConfig | None:
        if not request.expects_json:
            return None
        thinking = (
            types.ThinkingConfig(thinking_budget=self.thinking_budget)
            if self.thinking_budget is not None
            else None
        )
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            thinking_config=thinking,
        )

    async def generate(self, request: ServiceRequest) -> str:
        """
        Send one request and return the reply text.

        Args:
            request: Ordered segments, instruction last

        Returns:
            str: Reply text, empty if the model returned none

        Raises:
            MissingCredentialError: If no API key is configured (no request is sent)
            InvalidInputError: If an inline file cannot be decoded
            ServiceCallError: If the Gemini call fails
        """
        client = self._get_client()
        parts = [to_part(segment) for segment in request.segments]

        logger.info(
            f"{__name__}:generate - START model={self.model_id}, "
            f"parts={len(parts)}, json={request.expects_json}"
        )
        try:
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=self.model_id,
                contents=parts,
                config=self._build_config(request),
            )
        except Exception as e:
            logger.error(
                f"{__name__}:generate - FAILED at Gemini API call - "
                f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            raise ServiceCallError(
                f"Gemini call failed: {type(e).__name__}", model_id=self.model_id
            ) from e

        text = response.text or ""
        logger.info(f"{__name__}:generate - END reply_len={len(text)}")
        logger.debug(f"{__name__}:generate - reply={safe_log_value(text, max_length=300)}")
        return text
