"""Pull trace infrastructure - separate from the items themselves.

A Trace captures one Evidence entry per observed pull so a chain can be
inspected after the fact. Tracing never changes what flows through the
chain. Nesting is reconstructed only during visualization via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single event captured while a sequence was being pulled."""

    action: str = ""
    id: int = field(default=0)
    parent_id: int | None = field(default=None)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)

    def matches(self, **kwargs: Any) -> bool:
        """True if every criterion equals an attribute or an info entry."""
        return all(self.info.get(k) == v or getattr(self, k, None) == v for k, v in kwargs.items())


class Trace:
    """Runtime trace context for capturing pull events.

    Each traced chain records a root event; the events for its items name
    that root as parent, so several chains can share one Trace.

    Performance guarantees:
    - Trace disabled → single flag check overhead
    - Evidence append is O(1)
    - No tree construction while recording
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "parse.success", "parse.end")
            info: Additional context
            parent_id: Event ID of the chain root this event belongs to

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                timestamp=datetime.now(UTC),
                info=info or {},
            )
        )

        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events."""
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find recorded events matching the given criteria.

        Args:
            **kwargs: Criteria to match (e.g., action="parse.failure")
        """
        return [ev for ev in self._events if ev.matches(**kwargs)]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Group event IDs by the chain root they were recorded under.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
