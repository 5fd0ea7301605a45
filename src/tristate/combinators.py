"""Aggregation of many independent TriStates into one.

Errors are accumulated rather than short-circuited: every failure message
survives into the aggregate, in input order. Pending results collapse into a
single Idle that does not record which positions were pending.
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from src.tristate.state import TriState, error, idle, pure

T = TypeVar("T")

ERROR_SEPARATOR = "; "


def parallel_sequence(states: Iterable[TriState[T]]) -> TriState[list[T]]:
    """Turn a sequence of states into a state of a list.

    Returns:
        - Error joining every error message with ``"; "`` if any input failed
        - Content with all payloads in order if every input is Content
        - Idle otherwise (no errors, at least one Idle)

    An empty input yields ``Content([])``.
    """
    messages: list[str] = []
    others: list[TriState[T]] = []

    for state in states:
        if not isinstance(state, TriState):
            raise TypeError(
                f"parallel_sequence expects TriState elements, got {type(state).__name__}"
            )
        message = state.get_error_message()
        if message is not None:
            messages.append(message)
        else:
            others.append(state)

    if messages:
        return error(ERROR_SEPARATOR.join(messages))

    if all(state.is_content() for state in others):
        payloads: list[Any] = [state.get_or_none() for state in others]
        return pure(payloads)

    return idle()
