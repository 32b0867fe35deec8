"""Sensitivity list used when resolving statement sensitivity."""

from __future__ import annotations

from typing import Iterable

from .ordered_set import OrderedSet


class SensitivityCtx(OrderedSet):
    """Ordered set of sensitivity items with an event-dependency flag.

    ``contains_event_dep`` is true once an event-dependent item
    (rising/falling operator) has been recorded.
    """

    def __init__(self) -> None:
        super().__init__()
        self.contains_event_dep = False

    def extend(self, other: Iterable) -> None:
        """Add items of ``other``; a SensitivityCtx also passes on its flag."""
        super().extend(other)
        if isinstance(other, SensitivityCtx):
            self.contains_event_dep |= other.contains_event_dep

    def clear(self) -> None:
        super().clear()
        self.contains_event_dep = False