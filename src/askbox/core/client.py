"""
HTTP client for the remote text-generation endpoint.
"""
import logging
from typing import Any, Optional

import httpx

from .errors import DecodeFailure, ServerError, TransportFailure
from .response_adapter import build_payload

logger = logging.getLogger(__name__)

NO_DETAILS = "No details"


class GenerateClient:
    """
    Sends one question per call and returns the decoded JSON document.

    ``transport`` is handed to ``httpx.AsyncClient`` and lets tests swap the
    network for an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        url: Optional[str],
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def generate(self, text: str) -> Any:
        if not self.url:
            raise TransportFailure("ASKBOX_API_URL not configured")

        payload = build_payload(text)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TransportError as exc:
            raise TransportFailure(f"Request to {self.url} failed: {exc}") from exc

        if not response.is_success:
            raise ServerError(response.status_code, self._body_text(response))

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeFailure(f"Response body is not JSON: {exc}") from exc

    @staticmethod
    def _body_text(response: httpx.Response) -> str:
        try:
            return response.text
        except (UnicodeDecodeError, LookupError) as exc:
            logger.debug("Could not read error body: %s", exc)
            return NO_DETAILS
