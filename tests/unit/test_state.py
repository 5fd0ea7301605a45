"""Tests for the TriState type."""

import pytest
from hypothesis import given, strategies as st

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


states = st.one_of(
    st.just(idle()),
    st.text(min_size=1).map(error),
    st.integers().map(content),
)


def half_if_even(value: int) -> TriState[int]:
    if value % 2 == 0:
        return content(value // 2)
    return error(f"{value} is odd")


def pending_if_large(value: int) -> TriState[int]:
    if abs(value) > 1000:
        return idle()
    return content(value * 3)


def explode(*_args: object) -> object:
    raise AssertionError("callback must not be invoked")


class TestConstruction:
    def test_idle_is_singleton(self) -> None:
        assert idle() is idle()
        assert isinstance(idle(), Idle)

    def test_error(self) -> None:
        state = error("boom")
        assert isinstance(state, Error)
        assert state.get_error_message() == "boom"

    def test_error_without_message_uses_fallback(self) -> None:
        assert error().get_error_message() == UNKNOWN_ERROR_MESSAGE
        assert error("").get_error_message() == UNKNOWN_ERROR_MESSAGE
        assert error(None).get_error_message() == UNKNOWN_ERROR_MESSAGE

    def test_direct_empty_error_raises(self) -> None:
        with pytest.raises(ValueError, match="non-empty string"):
            Error("")

    def test_direct_non_string_error_raises(self) -> None:
        with pytest.raises(ValueError, match="non-empty string"):
            Error(42)  # type: ignore[arg-type]

    def test_content_and_pure_agree(self) -> None:
        assert content(5) == pure(5)
        assert isinstance(pure("x"), Content)

    def test_content_may_hold_none(self) -> None:
        state = content(None)
        assert state.is_content()
        assert state.get_or_none() is None

    def test_frozen(self) -> None:
        state = content(1)
        with pytest.raises(AttributeError):
            state.data = 2  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        assert content([1, 2]) == content([1, 2])
        assert error("a") == error("a")
        assert error("a") != error("b")
        assert idle() != error("a")
        assert content("a") != error("a")

    def test_pattern_matching(self) -> None:
        def describe(state: TriState[int]) -> str:
            match state:
                case Content(data):
                    return f"got {data}"
                case Error(message):
                    return f"failed: {message}"
                case Idle():
                    return "waiting"
            return "unreachable"

        assert describe(content(3)) == "got 3"
        assert describe(error("x")) == "failed: x"
        assert describe(idle()) == "waiting"


class TestPredicates:
    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (idle(), (True, False, False)),
            (error("e"), (False, True, False)),
            (content(1), (False, False, True)),
        ],
    )
    def test_exactly_one_predicate(self, state: TriState[int], expected: tuple) -> None:
        assert (state.is_idle(), state.is_error(), state.is_content()) == expected


class TestMap:
    def test_map_content(self) -> None:
        assert content(5).map(lambda x: x * 2) == content(10)

    def test_map_idle_skips_transform(self) -> None:
        assert idle().map(explode) == idle()

    def test_map_error_keeps_message(self) -> None:
        assert error("bad").map(explode) == error("bad")

    @given(states)
    def test_functor_identity(self, state: TriState[int]) -> None:
        assert state.map(lambda v: v) == state

    @given(states)
    def test_functor_composition(self, state: TriState[int]) -> None:
        first = lambda x: x + 1  # noqa: E731
        second = lambda x: x * 2  # noqa: E731
        assert state.map(first).map(second) == state.map(lambda x: second(first(x)))


class TestFlatMap:
    def test_flat_map_content_not_rewrapped(self) -> None:
        assert content(4).flat_map(half_if_even) == content(2)
        assert content(3).flat_map(half_if_even) == error("3 is odd")
        assert content(1).flat_map(lambda _: idle()) == idle()

    def test_flat_map_non_content_skips_transform(self) -> None:
        assert idle().flat_map(explode) == idle()
        assert error("bad").flat_map(explode) == error("bad")

    def test_flat_map_requires_tristate(self) -> None:
        with pytest.raises(TypeError, match="must return a TriState"):
            content(1).flat_map(lambda x: x + 1)  # type: ignore[arg-type, return-value]

    @given(st.integers())
    def test_left_identity(self, value: int) -> None:
        assert pure(value).flat_map(half_if_even) == half_if_even(value)

    @given(states)
    def test_right_identity(self, state: TriState[int]) -> None:
        assert state.flat_map(pure) == state

    @given(states)
    def test_associativity(self, state: TriState[int]) -> None:
        left = state.flat_map(half_if_even).flat_map(pending_if_large)
        right = state.flat_map(lambda x: half_if_even(x).flat_map(pending_if_large))
        assert left == right


class TestFold:
    def test_fold_dispatches_one_handler(self) -> None:
        handlers = {
            "on_content": lambda data: f"content {data}",
            "on_error": lambda message: f"error {message}",
            "on_idle": lambda: "idle",
        }
        assert content(1).fold(**handlers) == "content 1"
        assert error("x").fold(**handlers) == "error x"
        assert idle().fold(**handlers) == "idle"

    def test_fold_does_not_call_other_handlers(self) -> None:
        assert content(1).fold(lambda d: d, explode, explode) == 1
        assert error("x").fold(explode, lambda m: m, explode) == "x"
        assert idle().fold(explode, explode, lambda: "idle") == "idle"


class TestObservation:
    def test_on_content_runs_only_for_content(self) -> None:
        seen: list[object] = []
        state = content(7)
        assert state.on_content(seen.append) is state
        idle().on_content(explode)
        error("e").on_content(explode)
        assert seen == [7]

    def test_on_error_runs_only_for_error(self) -> None:
        seen: list[str] = []
        state = error("boom")
        assert state.on_error(seen.append) is state
        idle().on_error(explode)
        content(1).on_error(explode)
        assert seen == ["boom"]

    def test_on_idle_runs_only_for_idle(self) -> None:
        calls: list[str] = []
        state = idle()
        assert state.on_idle(lambda: calls.append("idle")) is state
        content(1).on_idle(explode)
        error("e").on_idle(explode)
        assert calls == ["idle"]

    def test_on_each_dispatches_once(self) -> None:
        calls: list[str] = []
        state = error("e")
        result = state.on_each(
            on_idle=lambda: calls.append("idle"),
            on_error=lambda m: calls.append(f"error:{m}"),
            on_content=lambda d: calls.append(f"content:{d}"),
        )
        assert result is state
        assert calls == ["error:e"]

    def test_on_each_defaults_are_noops(self) -> None:
        state = content(1)
        assert state.on_each() is state

    def test_chaining(self) -> None:
        calls: list[str] = []
        content(2).on_idle(explode).on_error(explode).on_content(
            lambda d: calls.append(str(d))
        )
        assert calls == ["2"]


class TestExtraction:
    def test_get_or_none(self) -> None:
        assert content(3).get_or_none() == 3
        assert idle().get_or_none() is None
        assert error("e").get_or_none() is None

    def test_get_or_default(self) -> None:
        assert content(3).get_or_default(0) == 3
        assert idle().get_or_default(0) == 0
        assert error("e").get_or_default(0) == 0

    def test_get_or_default_returns_callable_as_value(self) -> None:
        assert idle().get_or_default(len) is len

    def test_get_or_else(self) -> None:
        assert idle().get_or_else(lambda: 9) == 9
        assert error("e").get_or_else(lambda: 9) == 9

    def test_get_or_else_content_skips_supplier(self) -> None:
        assert content(3).get_or_else(explode) == 3

    def test_get_error_message(self) -> None:
        assert error("e").get_error_message() == "e"
        assert idle().get_error_message() is None
        assert content("e").get_error_message() is None

    @given(st.integers(), st.integers())
    def test_content_ignores_default(self, value: int, default: int) -> None:
        assert content(value).get_or_default(default) == value


class TestRecover:
    def test_recover_heals_error(self) -> None:
        recovered = error("e").recover(lambda m: len(m))
        assert recovered.is_content()
        assert recovered == content(1)

    def test_recover_leaves_idle_idle(self) -> None:
        assert idle().recover(lambda m: 1) == idle()
        assert not idle().recover(lambda m: 1).is_content()

    def test_recover_leaves_content(self) -> None:
        state = content(5)
        assert state.recover(explode) is state

    def test_recover_with(self) -> None:
        assert error("e").recover_with(lambda m: content(m.upper())) == content("E")
        assert error("e").recover_with(lambda m: error(f"still {m}")) == error("still e")
        assert error("e").recover_with(lambda m: idle()) == idle()

    def test_recover_with_passes_through(self) -> None:
        assert idle().recover_with(explode) == idle()
        assert content(1).recover_with(explode) == content(1)

    @given(st.text(min_size=1))
    def test_recover_receives_message(self, message: str) -> None:
        assert error(message).recover(lambda m: m) == content(message)


class TestZipAndCombine:
    def test_zip_idle_receiver(self) -> None:
        assert idle().zip(content(1)) == idle()

    def test_zip_error_receiver(self) -> None:
        assert error("x").zip(content(1)) == error("x")
        assert error("x").zip(error("y")) == error("x")

    def test_zip_error_argument(self) -> None:
        assert content(1).zip(error("y")) == error("y")
        assert content(1).zip(idle()) == idle()

    def test_zip_both_content(self) -> None:
        assert content(1).zip(content("a")) == content((1, "a"))

    def test_combine(self) -> None:
        assert content(2).combine(content(3), lambda a, b: a * b) == content(6)
        assert idle().combine(error("y"), explode) == idle()
        assert error("x").combine(idle(), explode) == error("x")
        assert content(2).combine(error("y"), explode) == error("y")


class TestFlatten:
    def test_flatten_content(self) -> None:
        assert content(content(1)).flatten() == content(1)
        assert content(error("inner")).flatten() == error("inner")
        assert content(idle()).flatten() == idle()

    def test_flatten_outer(self) -> None:
        assert idle().flatten() == idle()
        assert error("outer").flatten() == error("outer")

    def test_flatten_removes_one_level(self) -> None:
        assert content(content(content(1))).flatten() == content(content(1))
