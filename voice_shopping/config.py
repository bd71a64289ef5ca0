"""Settings read from the environment (and an optional .env file)."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

from voice_shopping.matching import POLICIES

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    number_word_match: str = "substring"
    store_match: str = "substring"
    strip_number_words: bool = False
    cors_origins: str = "*"

    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def _policy_name(env: str) -> str:
    value = os.getenv(env, "substring").strip().lower()
    if value not in POLICIES:
        raise ValueError(f"{env}={value!r} is not one of {sorted(POLICIES)}")
    return value


def _build_settings() -> Settings:
    load_dotenv()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        debug=_flag("FLASK_DEBUG"),
        number_word_match=_policy_name("NUMBER_WORD_MATCH"),
        store_match=_policy_name("STORE_MATCH"),
        strip_number_words=_flag("STRIP_NUMBER_WORDS"),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
    )


@lru_cache
def get_settings() -> Settings:
    return _build_settings()


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
