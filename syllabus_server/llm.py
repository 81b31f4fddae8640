# -*- coding: utf-8 -*-
"""
The LLM capability used by assignment extraction.

Anything with an async ``complete(prompt) -> str`` works; OpenAILLM is the
implementation backed by the OpenAI chat completions API.
"""
from __future__ import annotations

import asyncio
import logging
import os
import typing as t

import openai
from openai import OpenAI

from board_server.errors import LLMError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-5"


class LLMClient(t.Protocol):
    """An opaque text-in, text-out LLM."""

    async def complete(self, prompt: str) -> str:
        ...


class OpenAILLM:
    """LLMClient calling the OpenAI chat completions API in JSON mode.

    :param api_key: API key; defaults to the OPENAI_API_KEY environment variable.
    :param model: Model name; defaults to BRONTOBOARD_MODEL, then gpt-5.
    """

    def __init__(self, api_key: t.Optional[str] = None, model: t.Optional[str] = None) -> None:
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise LLMError("OPENAI_API_KEY environment variable is not set.")
        self.model = model or os.getenv("BRONTOBOARD_MODEL", DEFAULT_MODEL)
        self._client = OpenAI(api_key=api_key)

    def _complete_sync(self, prompt: str) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                response_format={"type": "json_object"},
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as e:
            raise LLMError(f"Error calling {self.model}: {e}") from e

        content = completion.choices[0].message.content
        if not content:
            raise LLMError(f"Empty response from {self.model}")
        return content

    async def complete(self, prompt: str) -> str:
        """Sends the prompt as a single user message and returns the reply text."""
        logger.debug("Sending %d character prompt to %s", len(prompt), self.model)
        # The OpenAI client is synchronous; keep the event loop free while it waits.
        return await asyncio.to_thread(self._complete_sync, prompt)
