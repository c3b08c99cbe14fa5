from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LLMConfig:
    api_key: str
    model: str = "llama-3.3-70b-versatile"
    timeout: float = 30.0
    max_tokens: int = 1024
    temperature: float = 0.3
    # One attempt per prompt; pacing between prompts is handled by the caller.
    max_retries: int = 0
