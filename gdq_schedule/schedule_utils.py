"""Assemble a day-by-day event schedule from tracker runs and interviews."""

import decimal
import math
import numbers
import re
from datetime import datetime

from . import tracker_api
from .config import config
from .get_id import get_id
from .logger import get_logger
from .models import Day, Event, Interview, Run, Schedule, Segment

logger = get_logger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Date and wall-clock time, without any "Z" or UTC offset that follows.
_LOCAL_TIMESTAMP = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ]\d{2}:\d{2}(?::\d{2})?)?")


class InvalidArgument(ValueError):
    """Event id is not a number or falls outside the accepted range."""


class NotFound(LookupError):
    """No event with the requested id exists on the tracker."""


def day_label(starttime: str) -> str:
    """
    Label the calendar day a run starts on, e.g. ``"Friday 12"``.

    The UTC offset (or "Z") is dropped so the wall-clock time of the
    timestamp decides the day. Weekday names are always English and the
    number is the day of the year, unpadded.

    Raises:
        ValueError: if the timestamp is not ISO formatted
    """
    match = _LOCAL_TIMESTAMP.match(starttime)
    if match is None:
        raise ValueError(f"Invalid isoformat string: {starttime!r}")
    start = datetime.fromisoformat(match.group())
    return f"{WEEKDAYS[start.weekday()]} {start.timetuple().tm_yday}"


def build_schedule(event: Event, runs: list[Run], interviews: list[Interview]) -> Schedule:
    """
    Fold runs and interviews into a schedule grouped by day.

    Algorithm:
    1. Copy the event fields into a new schedule with no days
    2. Walk the runs in the given order, opening a new day whenever the
       day label changes from the previous run
    3. Before each run, insert a segment holding the interviews that share
       its order, starting when the previous run ended
    4. Append the run to the current day

    Args:
        event: Event the runs belong to
        runs: Runs sorted by order
        interviews: Interviews of the event, in any order

    Returns:
        The schedule with days in the order their first run was seen
    """
    schedule = Schedule(**event.model_dump(exclude={"type"}), days=[])

    current_label: str | None = None
    current_day: Day | None = None
    prev_end_time = ""

    for run in runs:
        label = day_label(run.starttime)

        if label != current_label:
            current_label = label
            current_day = Day(id=get_id(label), date=run.starttime, segments=[])
            schedule.days.append(current_day)
            logger.debug(f"[build_schedule] day {current_day.id} opened by run {run.id}")

        run_interviews = [interview for interview in interviews if interview.order == run.order]

        if run_interviews:
            current_day.segments.append(Segment(
                id=f"segment-{run.order}",
                items=sorted(run_interviews, key=lambda i: (i.order, i.suborder or 0)),
                starttime=prev_end_time,
            ))

        prev_end_time = run.endtime
        current_day.segments.append(run)

    return schedule


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, decimal.Decimal):
        return not value.is_nan()
    return isinstance(value, numbers.Real) and not math.isnan(value)


def _validate_event_id(event_id) -> None:
    if (
        not _is_number(event_id)
        or not config.MIN_EVENT_ID <= event_id < config.MAX_EVENT_ID
    ):
        raise InvalidArgument(
            f"eventId must be a value from range {config.MIN_EVENT_ID} to {config.MAX_EVENT_ID - 1}"
        )


def get_event_schedule(event_id: int) -> Schedule:
    """
    Fetch an event from the tracker and build its schedule.

    Interviews are only requested when the event has runs.

    Args:
        event_id: Tracker id of the event; any real number or Decimal

    Returns:
        The event schedule grouped by day

    Raises:
        InvalidArgument: if event_id is not a number in the accepted range
        NotFound: if the tracker has no event with that id
    """
    _validate_event_id(event_id)

    event = next((e for e in tracker_api.get_events() if e.id == event_id), None)
    if event is None:
        raise NotFound(f"No event available for eventId {event_id}")

    runs = tracker_api.get_runs(event.id)
    interviews = tracker_api.get_interviews(event.id) if runs else []

    schedule = build_schedule(event, runs, interviews)
    logger.info(
        f"[get_event_schedule] event {event.id}: {len(runs)} runs, "
        f"{len(interviews)} interviews, {len(schedule.days)} days"
    )
    return schedule
