"""Async loading example.

Demonstrates wrapping coroutines with suspend_effect, aggregating the
outcomes with parallel_sequence, and folding the result into display text.

Usage:
    python examples/async_loading.py
"""

import asyncio
import random

from src.tristate import TriState, TriStateConfig, parallel_sequence, suspend_effect


async def load_profile(user_id: int) -> dict[str, object]:
    # 1. Simulate a slow lookup that sometimes fails
    await asyncio.sleep(random.uniform(0.01, 0.05))
    if user_id % 4 == 0:
        raise LookupError(f"user {user_id} does not exist")
    return {"id": user_id, "name": f"user-{user_id}"}


def describe(state: TriState[list[dict[str, object]]]) -> str:
    return state.fold(
        on_content=lambda profiles: f"Loaded {len(profiles)} profiles",
        on_error=lambda message: f"Some profiles failed: {message}",
        on_idle=lambda: "Still loading...",
    )


async def main() -> None:
    config = TriStateConfig(fallback_message="Profile service failed")

    # 2. Run the lookups concurrently; each outcome becomes a TriState
    for batch in ([1, 2, 3], [1, 4, 8]):
        states = await asyncio.gather(
            *(suspend_effect(load_profile(user_id), config=config) for user_id in batch)
        )
        for user_id, state in zip(batch, states):
            print(f"  user {user_id}: {state}")

        # 3. Aggregate and render
        print(describe(parallel_sequence(states)))
        print()


if __name__ == "__main__":
    asyncio.run(main())
