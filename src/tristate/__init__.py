"""Tri-state results - Idle, Error and Content with a combinator library."""

from src.tristate.combinators import parallel_sequence
from src.tristate.config import TriStateConfig, default_config
from src.tristate.effects import effect, suspend_effect
from src.tristate.snapshot import StateKind, StateSnapshot, from_snapshot, to_snapshot
from src.tristate.state import (
    UNKNOWN_ERROR_MESSAGE,
    Content,
    Error,
    Idle,
    TriState,
    content,
    error,
    idle,
    pure,
)

__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "Content",
    "Error",
    "Idle",
    "StateKind",
    "StateSnapshot",
    "TriState",
    "TriStateConfig",
    "content",
    "default_config",
    "effect",
    "error",
    "from_snapshot",
    "idle",
    "parallel_sequence",
    "pure",
    "suspend_effect",
    "to_snapshot",
]
