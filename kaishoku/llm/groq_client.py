from __future__ import annotations

import logging

from groq import Groq

from .config import LLMConfig

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the generation API does not return usable text."""


def generate_text(prompt: str, config: LLMConfig) -> str:
    """
    Send ``prompt`` as a single user message and return the completion text.

    Raises ``GenerationError`` on any client or API failure, or when the
    model returns an empty completion.
    """
    try:
        client = Groq(
            api_key=config.api_key,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )
        response = client.chat.completions.create(
            model=config.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        content = response.choices[0].message.content or ""
    except Exception as exc:
        raise GenerationError(f"Groq API call failed: {exc}") from exc

    text = content.strip()
    if not text:
        raise GenerationError("Groq API returned an empty completion")
    logger.debug("Generated %d characters with %s", len(text), config.model)
    return text
