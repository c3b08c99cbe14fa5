from __future__ import annotations

import logging
import time
from typing import Any, Callable

import httpx

from ..config import AppConfig
from ..hotpepper.client import search_shops
from ..llm.config import LLMConfig
from ..llm.groq_client import GenerationError, generate_text
from .models import Annotation, SearchCriteria
from .prompts import ANALYSIS_FAILED, build_evaluation_prompt

logger = logging.getLogger(__name__)


def annotate_shop(shop: dict[str, Any], config: LLMConfig) -> Annotation:
    """
    Ask the generation API how well ``shop`` suits a business dinner.

    Never raises for generation failures; a failed attempt yields the fixed
    placeholder text instead.
    """
    prompt = build_evaluation_prompt(shop)
    try:
        text = generate_text(prompt, config)
    except GenerationError:
        logger.warning("Annotation failed for shop %r", shop.get("name"), exc_info=True)
        return Annotation(ok=False, text=ANALYSIS_FAILED)
    return Annotation(ok=True, text=text)


def search_and_annotate(
    criteria: SearchCriteria,
    config: AppConfig,
    client: httpx.Client,
    sleep: Callable[[float], None] = time.sleep,
) -> list[dict[str, Any]]:
    """
    Search shops and attach an ``aiAnalysis`` text to each, in search order.

    Shops are annotated one at a time and ``sleep(config.annotation_delay)``
    runs after every attempt, failed or not. ``DirectorySearchError`` from
    the search step propagates; annotation failures never do.
    """
    shops = search_shops(criteria, config.hotpepper, client)

    annotated: list[dict[str, Any]] = []
    failures = 0
    for shop in shops:
        annotation = annotate_shop(shop, config.llm)
        if not annotation.ok:
            failures += 1
        annotated.append({**shop, "aiAnalysis": annotation.text})
        sleep(config.annotation_delay)

    logger.info(
        "Annotated %d shops for keyword=%r (%d failed)",
        len(annotated), criteria.keyword, failures,
    )
    return annotated
