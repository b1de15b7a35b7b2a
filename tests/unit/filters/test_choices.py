"""Unit tests for ChoiceSet."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pgrest_filters.filters import ChoiceSet
from pgrest_filters.filters.choices import choices, chosen, toggle
from pgrest_filters.kernel.errors import ValidationError


CATEGORIES = ("books", "music", "games")


class TestChoiceSet:
    def test_chosen_must_be_subset(self) -> None:
        with pytest.raises(ValidationError):
            ChoiceSet(CATEGORIES, frozenset({"films"}))

    def test_of_drops_unknown(self) -> None:
        choice_set = ChoiceSet.of(CATEGORIES, ["films", "music"])
        assert choice_set.chosen == frozenset({"music"})

    def test_toggle_adds_and_removes(self) -> None:
        empty = ChoiceSet(CATEGORIES)
        assert toggle(empty, "games").chosen == frozenset({"games"})
        assert toggle(toggle(empty, "games"), "games") == empty

    def test_toggle_unknown_is_noop(self) -> None:
        choice_set = ChoiceSet(CATEGORIES, frozenset({"books"}))
        assert choice_set.toggle("films") is choice_set

    def test_selected_follows_choice_order(self) -> None:
        choice_set = ChoiceSet.of(CATEGORIES, ["games", "books"])
        assert choice_set.selected() == ["books", "games"]

    def test_accessors(self) -> None:
        choice_set = ChoiceSet.of(CATEGORIES, ["music"])
        assert choices(choice_set) == CATEGORIES
        assert chosen(choice_set) == frozenset({"music"})
        assert choice_set.is_chosen("music")


@given(
    st.sets(st.sampled_from(CATEGORIES)),
    st.text(max_size=8) | st.sampled_from(CATEGORIES),
)
def test_double_toggle_is_identity(picked: set[str], choice: str) -> None:
    choice_set = ChoiceSet(CATEGORIES, frozenset(picked))
    assert choice_set.toggle(choice).toggle(choice) == choice_set
