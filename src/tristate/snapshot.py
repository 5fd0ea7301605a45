"""JSON-ready snapshots of TriState values.

A presentation layer usually needs to hand state over as plain data (a
view-state object, a JSON payload). ``StateSnapshot`` is that form, and
``to_snapshot`` / ``from_snapshot`` convert in both directions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from src.tristate.state import TriState, content, error, idle


class StateKind(str, Enum):
    """Which variant a snapshot describes."""

    IDLE = "idle"
    ERROR = "error"
    CONTENT = "content"


class StateSnapshot(BaseModel):
    """Serializable form of a single TriState."""

    kind: StateKind = Field(..., description="Active variant")
    message: Optional[str] = Field(default=None, description="Failure message, errors only")
    data: Any = Field(default=None, description="Payload, content only")

    @model_validator(mode="after")
    def check_payload(self) -> StateSnapshot:
        if self.kind == StateKind.ERROR:
            if not self.message:
                raise ValueError("error snapshot requires a non-empty message")
        elif self.message is not None:
            raise ValueError(f"{self.kind.value} snapshot cannot carry a message")
        if self.kind == StateKind.IDLE and self.data is not None:
            raise ValueError("idle snapshot cannot carry data")
        return self


def to_snapshot(state: TriState[Any]) -> StateSnapshot:
    return state.fold(
        on_content=lambda data: StateSnapshot(kind=StateKind.CONTENT, data=data),
        on_error=lambda message: StateSnapshot(kind=StateKind.ERROR, message=message),
        on_idle=lambda: StateSnapshot(kind=StateKind.IDLE),
    )


def from_snapshot(snapshot: StateSnapshot) -> TriState[Any]:
    if snapshot.kind == StateKind.CONTENT:
        return content(snapshot.data)
    if snapshot.kind == StateKind.ERROR:
        return error(snapshot.message)
    return idle()
