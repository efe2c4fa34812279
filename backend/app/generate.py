#!/usr/bin/env python3
"""
Generation module for the store assistant.

This module streams answers from an OpenAI-compatible chat-completions API
(Groq by default).
"""

import json
from typing import Iterator, Optional

import requests

from .config import Config
from ..utils.logger import get_logger

logger = get_logger()


class GenerationError(Exception):
    """The remote model could not produce (the rest of) an answer."""


class GenerationClient:
    """Client for streaming answers from the assistant LLM."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 api_url: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize the generation client."""
        self.api_key = api_key or Config.LLM_API_KEY
        self.model = model or Config.LLM_MODEL
        self.api_base_url = api_url or Config.LLM_API_URL
        self.timeout = timeout or Config.LLM_TIMEOUT

    def _payload(self, prompt: str) -> dict:
        return {
            "model": self.model,
            "messages": [{"role": "system", "content": prompt}],
            "temperature": 0.2,
            "max_tokens": 500,
            "stream": True,
        }

    @staticmethod
    def parse_stream_line(line: str) -> Optional[str]:
        """
        Extract the delta text from one server-sent line.

        Args:
            line: Raw line from the response body

        Returns:
            The content fragment ("" for keep-alives and empty deltas), or None at ``[DONE]``
        """
        if not line or not line.startswith("data:"):
            return ""
        data = line[len("data:"):].strip()
        if data == "[DONE]":
            return None
        try:
            chunk = json.loads(data)
            choices = chunk.get("choices") or [{}]
            return (choices[0].get("delta") or {}).get("content") or ""
        except (ValueError, AttributeError, IndexError) as e:
            raise GenerationError(f"Malformed stream chunk: {data[:80]}") from e

    def stream_answer(self, prompt: str) -> Iterator[str]:
        """
        Stream an answer for the prompt.

        Args:
            prompt: Fully built prompt

        Yields:
            Non-empty content fragments in arrival order

        Raises:
            GenerationError: missing key, HTTP failure, timeout or malformed stream
        """
        if not self.api_key:
            raise GenerationError("Assistant API key is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.debug(f"[CHAT] Streaming from {self.model}, prompt length: {len(prompt)}")
        try:
            with requests.post(self.api_base_url, headers=headers, json=self._payload(prompt),
                               stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                for line in response.iter_lines(decode_unicode=True):
                    content = self.parse_stream_line(line)
                    if content is None:
                        return
                    if content:
                        yield content
        except requests.exceptions.RequestException as e:
            raise GenerationError(f"Error generating answer: {e}") from e
