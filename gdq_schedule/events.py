"""Display names of events known ahead of time, keyed by tracker event id."""

from .models import KnownEvent

KNOWN_EVENTS: dict[int, KnownEvent] = {
    46: KnownEvent(name="Awesome Games Done Quick 2024", short_name="AGDQ 2024"),
}


def get_known_event(event_id: int) -> KnownEvent | None:
    return KNOWN_EVENTS.get(event_id)
