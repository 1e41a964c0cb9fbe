from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    # Tried in order; the first successful response short-circuits the rest
    models: tuple[str, ...] = ("llama-3.3-70b-versatile", "mixtral-8x7b-32768")
    timeout: float = 10.0
    max_tokens: int = 1024
    temperature: float = 0.3
    enabled: bool = True

    @property
    def is_usable(self) -> bool:
        return self.enabled and bool(self.api_key) and "PLACEHOLDER" not in self.api_key


DEFAULT_LLM_CONFIG = LLMConfig()
