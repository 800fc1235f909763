"""Session control entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol

EventHandler = Callable[[Mapping[str, Any]], Any]


class EventSink(Protocol):  # pylint: disable=too-few-public-methods
    """Transport that delivers outbound events to a connected UI surface."""

    def send_event(self, event_name: str, data: Any) -> None: ...


@dataclass(frozen=True)
class EventRecord:
    """Outbound event kept in the controller log while no sink is connected."""

    event_name: str
    data: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class InboundEvent:
    """Named UI event with keyword arguments for its handler."""

    event_type: str
    args: Mapping[str, Any]

    @staticmethod
    def from_mapping(payload: Mapping[str, Any]) -> InboundEvent:
        event_type = payload.get("EventType")
        if not isinstance(event_type, str) or not event_type.strip():
            raise ValueError("Event payload requires a non-empty 'EventType'.")
        args = payload.get("Args") or {}
        if not isinstance(args, Mapping):
            raise ValueError("Event 'Args' must be an object.")
        return InboundEvent(event_type=event_type.strip(), args=dict(args))
