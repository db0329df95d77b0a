from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import strategies as st

if TYPE_CHECKING:
    from collections.abc import Callable

# Any value accepted as a payload: everything except None.
payloads = st.one_of(
    st.integers(),
    st.text(),
    st.booleans(),
    st.floats(allow_nan=False),
    st.lists(st.integers(), max_size=5),
    st.tuples(st.integers(), st.text(max_size=5)),
)

mappers: st.SearchStrategy[Callable[[object], object]] = st.sampled_from(
    [
        repr,
        lambda v: ("wrapped", v),
        lambda v: f"Value {v}",
        lambda v: [v, v],
    ]
)


class CallRecorder:
    """Callable that records its arguments and returns a fixed value."""

    def __init__(self, returns: object = "recorded") -> None:
        self.returns = returns
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)
