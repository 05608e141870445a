"""Configuration management for tickertape"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from tickertape.shared.constants import (
    ALLORIGINS_URL,
    CODETABS_URL,
    DEFAULT_BINDING_ATTRIBUTE,
    DEFAULT_CONTAINER_SELECTOR,
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class Config:
    """Configuration for the ticker refresh loaded from environment variables"""

    codetabs_url: str = CODETABS_URL
    allorigins_url: str = ALLORIGINS_URL
    http_timeout: float = 15.0
    binding_attribute: str = DEFAULT_BINDING_ATTRIBUTE
    container_selector: str = DEFAULT_CONTAINER_SELECTOR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables (and ``.env``)

        Returns:
            Config instance with values from environment

        Raises:
            ValueError: If a variable is present but invalid
        """
        load_dotenv()

        http_timeout = _env_float("TICKERTAPE_HTTP_TIMEOUT", cls.http_timeout)
        if http_timeout <= 0:
            raise ValueError("TICKERTAPE_HTTP_TIMEOUT must be positive")

        log_level = os.getenv("TICKERTAPE_LOG_LEVEL", cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"TICKERTAPE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}"
            )

        config = cls(
            codetabs_url=os.getenv("TICKERTAPE_CODETABS_URL", CODETABS_URL),
            allorigins_url=os.getenv(
                "TICKERTAPE_ALLORIGINS_URL", ALLORIGINS_URL
            ),
            http_timeout=http_timeout,
            binding_attribute=os.getenv(
                "TICKERTAPE_BINDING_ATTRIBUTE", DEFAULT_BINDING_ATTRIBUTE
            ),
            container_selector=os.getenv(
                "TICKERTAPE_CONTAINER_SELECTOR", DEFAULT_CONTAINER_SELECTOR
            ),
            log_level=log_level,
        )

        logger.info("Configuration loaded:")
        logger.info(f"  Codetabs relay: {config.codetabs_url}")
        logger.info(f"  AllOrigins relay: {config.allorigins_url}")
        logger.info(f"  HTTP timeout: {config.http_timeout}s")
        logger.info(f"  Binding attribute: {config.binding_attribute}")
        logger.info(f"  Container selector: {config.container_selector}")

        return config
