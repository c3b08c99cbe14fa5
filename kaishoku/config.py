from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from .hotpepper.config import HOTPEPPER_URL, HotPepperConfig
from .llm.config import LLMConfig

_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

REQUIRED_VARIABLES = ("HOTPEPPER_API_KEY", "GROQ_API_KEY")
DEFAULT_ANNOTATION_DELAY = 3.0


class ConfigurationError(Exception):
    """Raised when the process cannot be configured to serve requests."""


@dataclass(frozen=True)
class AppConfig:
    hotpepper: HotPepperConfig
    llm: LLMConfig
    # Seconds to wait after each generation call.
    annotation_delay: float = DEFAULT_ANNOTATION_DELAY


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Build the read-only application config from the environment.

    When ``environ`` is omitted, the project-root ``.env`` is loaded first and
    ``os.environ`` is used. Raises ``ConfigurationError`` if either API key is
    missing or the delay is not a non-negative number.
    """
    if environ is None:
        load_dotenv(_ENV_PATH)
        environ = os.environ

    missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
    if missing:
        raise ConfigurationError(
            f"API keys are not defined in environment variables: {', '.join(missing)}"
        )

    raw_delay = environ.get("ANNOTATION_DELAY_SECONDS", str(DEFAULT_ANNOTATION_DELAY))
    try:
        delay = float(raw_delay)
    except ValueError:
        raise ConfigurationError(f"ANNOTATION_DELAY_SECONDS must be a number, got {raw_delay!r}")
    if delay < 0:
        raise ConfigurationError("ANNOTATION_DELAY_SECONDS must not be negative")

    llm_kwargs = {}
    if environ.get("GROQ_MODEL"):
        llm_kwargs["model"] = environ["GROQ_MODEL"]

    return AppConfig(
        hotpepper=HotPepperConfig(
            api_key=environ["HOTPEPPER_API_KEY"],
            url=environ.get("HOTPEPPER_URL") or HOTPEPPER_URL,
        ),
        llm=LLMConfig(api_key=environ["GROQ_API_KEY"], **llm_kwargs),
        annotation_delay=delay,
    )
