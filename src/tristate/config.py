"""Configuration for the tri-state effect adapters.

Controls where ``effect`` and ``suspend_effect`` draw the line between
failures they capture into an Error and signals they let propagate.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from src.tristate.state import UNKNOWN_ERROR_MESSAGE


class TriStateConfig(BaseSettings):
    """Effect adapter settings.

    All settings can be overridden via environment variables with the TRISTATE_ prefix.
    Example: TRISTATE_CAPTURE_CANCELLATION=true
    """

    model_config = {"env_prefix": "TRISTATE_"}

    fallback_message: str = Field(
        default=UNKNOWN_ERROR_MESSAGE,
        min_length=1,
        description="Error message used when a failure carries no description",
    )
    capture_cancellation: bool = Field(
        default=False,
        description="Convert asyncio cancellation into an Error instead of re-raising it",
    )
    log_captured_failures: bool = Field(
        default=True, description="Log captured failures with their traceback at DEBUG"
    )


@lru_cache(maxsize=1)
def default_config() -> TriStateConfig:
    """Return the process-wide default configuration, read once from the environment."""
    return TriStateConfig()
