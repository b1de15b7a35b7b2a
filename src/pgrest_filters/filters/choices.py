"""Filters – ChoiceSet, the value of multi-choice membership operators."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from pgrest_filters.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class ChoiceSet:
    """All legal choices of an enum column plus the currently chosen subset.

    ``choices`` keeps display order; ``chosen`` has no order of its own and is
    always a subset of ``choices``.
    """

    choices: tuple[str, ...]
    chosen: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        unknown = self.chosen - set(self.choices)
        if unknown:
            raise ValidationError(
                "chosen values must be listed in choices",
                errors=[
                    {"field": "chosen", "value": value, "reason": "not a known choice"}
                    for value in sorted(unknown)
                ],
            )

    @classmethod
    def of(cls, choices: Iterable[str], chosen: Iterable[str] = ()) -> "ChoiceSet":
        """Build a set, silently dropping chosen values that are not choices."""
        ordered = tuple(dict.fromkeys(choices))
        known = set(ordered)
        return cls(ordered, frozenset(c for c in chosen if c in known))

    def toggle(self, choice: str) -> "ChoiceSet":
        if choice not in self.choices:
            return self
        return dataclasses.replace(self, chosen=self.chosen ^ {choice})

    def is_chosen(self, choice: str) -> bool:
        return choice in self.chosen

    def selected(self) -> list[str]:
        """Chosen values in ``choices`` order."""
        return [c for c in self.choices if c in self.chosen]


def choices(choice_set: ChoiceSet) -> tuple[str, ...]:
    return choice_set.choices


def chosen(choice_set: ChoiceSet) -> frozenset[str]:
    return choice_set.chosen


def toggle(choice_set: ChoiceSet, choice: str) -> ChoiceSet:
    return choice_set.toggle(choice)


__all__ = ["ChoiceSet", "choices", "chosen", "toggle"]
