"""Build day-by-day schedules of Games Done Quick events from the tracker API."""

from .events import KNOWN_EVENTS, get_known_event
from .get_id import get_id
from .models import (
    Day,
    Event,
    FetchResult,
    Interview,
    KnownEvent,
    Run,
    Schedule,
    Segment
)
from .schedule_utils import (
    InvalidArgument,
    NotFound,
    build_schedule,
    day_label,
    get_event_schedule
)
from .tracker_api import (
    fetch_events,
    fetch_interviews,
    fetch_runs,
    get_events,
    get_interviews,
    get_runs
)

__all__ = [
    'KNOWN_EVENTS',
    'get_known_event',
    'get_id',
    'Day',
    'Event',
    'FetchResult',
    'Interview',
    'KnownEvent',
    'Run',
    'Schedule',
    'Segment',
    'InvalidArgument',
    'NotFound',
    'build_schedule',
    'day_label',
    'get_event_schedule',
    'fetch_events',
    'fetch_interviews',
    'fetch_runs',
    'get_events',
    'get_interviews',
    'get_runs'
]
