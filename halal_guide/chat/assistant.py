from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..catalog.models import Place
from ..geo.distance import Coordinate
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import OFFLINE_MESSAGE, GenerationState, complete, generate
from ..ranking.context import ContextMode, format_context
from ..ranking.engine import rank
from .models import ChatResponse, ConversationTurn
from .prompts import (
    DATABASE_REVIEW_PROMPT,
    EXTERNAL_MODE_NOTE,
    EXTERNAL_REVIEW_PROMPT,
    GUIDE_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 4  # last 2 exchanges
MISSING_KEY_MESSAGE = "Please set API Key first."


def _describe_gps(position: Coordinate | None) -> str:
    if position is None:
        return "Unknown"
    return f"Lat {position.latitude}, Lon {position.longitude}"


def build_system_prompt(
    query: str,
    context: str,
    mode: ContextMode,
    current_region: str | None = None,
    user_position: Coordinate | None = None,
) -> str:
    prompt = GUIDE_SYSTEM_PROMPT.format(
        query=query,
        gps=_describe_gps(user_position),
        current_region=current_region or "None",
        context=context,
    )
    if mode is ContextMode.external:
        prompt += "\n" + EXTERNAL_MODE_NOTE + "\n"
    return prompt


def build_messages(
    system_prompt: str,
    history: Sequence[ConversationTurn],
    query: str,
) -> list[dict[str, str]]:
    messages = [{"role": "system", "content": system_prompt}]
    for turn in list(history)[-HISTORY_WINDOW:]:
        messages.append({"role": turn.role.value, "content": turn.content})
    messages.append({"role": "user", "content": query})
    return messages


def ask(
    query: str,
    history: Sequence[ConversationTurn],
    catalog: Mapping[str, Sequence[Place]],
    current_region: str | None = None,
    user_position: Coordinate | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> ChatResponse:
    """
    Answer a guide question grounded in the catalog.

    Ranking always runs so the caller sees which places were handed to the
    model, even when the LLM itself is unavailable.
    """
    results = rank(query, catalog, user_position)
    mode, context = format_context(results)

    if not config.is_usable:
        return ChatResponse(message=MISSING_KEY_MESSAGE, mode=mode, results=results)

    system_prompt = build_system_prompt(query, context, mode, current_region, user_position)
    messages = build_messages(system_prompt, history, query)

    outcome = generate(messages, config=config)
    if outcome.state is not GenerationState.success:
        return ChatResponse(message=OFFLINE_MESSAGE, mode=mode, results=results)

    logger.info("Answered with %s in %s mode (%d places)", outcome.model, mode.value, len(results))
    return ChatResponse(message=outcome.text or "", mode=mode, results=results, model=outcome.model)


def build_review_prompt(
    place_name: str,
    region: str,
    language: str = "English",
    place: Place | None = None,
) -> str:
    if place is None:
        return EXTERNAL_REVIEW_PROMPT.format(place_name=place_name, region=region, language=language)
    return DATABASE_REVIEW_PROMPT.format(
        place_name=place_name,
        region=region,
        description=place.description,
        language=language,
    )


def write_review(
    place_name: str,
    region: str,
    language: str = "English",
    place: Place | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """Short review for a catalog place, or a general-knowledge guide when ``place`` is None."""
    if not config.is_usable:
        return MISSING_KEY_MESSAGE

    prompt = build_review_prompt(place_name, region, language, place)
    return complete([{"role": "user", "content": prompt}], config=config)


def find_place(
    catalog: Mapping[str, Sequence[Place]],
    region: str,
    place_name: str,
) -> Place | None:
    target = place_name.strip().lower()
    for place in catalog.get(region, []):
        if place.name.lower() == target:
            return place
    return None
