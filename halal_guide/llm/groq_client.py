from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = "Amina is currently offline. Please try again."


class GenerationState(str, Enum):
    trying = "trying"
    success = "success"
    exhausted = "exhausted"


@dataclass
class GenerationResult:
    state: GenerationState
    text: str | None = None
    model: str | None = None
    attempts: list[str] = field(default_factory=list)


def _call_model(client: Groq, model: str, messages: list[dict[str, str]], config: LLMConfig) -> str:
    response = client.chat.completions.create(
        model=model,
        messages=messages,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )
    return (response.choices[0].message.content or "").strip()


def generate(
    messages: list[dict[str, str]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> GenerationResult:
    """
    Walk the configured models in order until one answers.

    Trying(model_i) moves to Success on the first non-empty completion, or to
    Trying(model_i+1) on any error. Running out of models is Exhausted.
    """
    result = GenerationResult(state=GenerationState.trying)
    client = Groq(api_key=config.api_key, timeout=config.timeout)

    for model in config.models:
        result.attempts.append(model)
        try:
            text = _call_model(client, model, messages, config)
        except Exception:
            logger.warning("Groq model %s failed, trying next model", model, exc_info=True)
            continue

        if not text:
            logger.warning("Groq model %s returned an empty completion, trying next model", model)
            continue

        result.state = GenerationState.success
        result.text = text
        result.model = model
        return result

    result.state = GenerationState.exhausted
    logger.warning("All Groq models failed: %s", ", ".join(result.attempts))
    return result


def complete(
    messages: list[dict[str, str]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """Generated text, or ``OFFLINE_MESSAGE`` once every model has failed."""
    result = generate(messages, config=config)
    if result.state is GenerationState.success and result.text:
        return result.text
    return OFFLINE_MESSAGE
