"""Tracker records and the schedule tree built from them."""

from typing import Annotated, Generic, Literal, TypeVar, Union

import pydantic

T = TypeVar("T")


class TrackerRecord(pydantic.BaseModel):
    # Unknown tracker fields are kept and passed through to the schedule.
    # Only what the schedule fold reads is required; the rest may be null.
    model_config = pydantic.ConfigDict(extra="allow")


class Event(TrackerRecord):
    type: str | None = "event"
    id: int
    short: str | None = None
    name: str | None = None
    hashtag: str | None = None
    datetime: str | None = None
    timezone: str | None = None
    use_one_step_screening: bool | None = None


class Runner(TrackerRecord):
    type: str | None = "runner"
    id: int | None = None
    name: str | None = None
    stream: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    platform: str | None = None
    pronouns: str | None = None


class Headset(TrackerRecord):
    """Host or commentator on a run."""

    type: str | None = "headset"
    id: int | None = None
    name: str | None = None
    pronouns: str | None = None


class VideoLink(TrackerRecord):
    id: int | None = None
    link_type: str | None = None
    url: str | None = None


class Run(TrackerRecord):
    type: Literal["speedrun"] = "speedrun"
    id: int
    name: str | None = None
    display_name: str | None = None
    description: str | None = None
    category: str | None = None
    console: str | None = None
    runners: list[Runner] | None = []
    hosts: list[Headset] | None = []
    commentators: list[Headset] | None = []
    starttime: str
    endtime: str
    order: int
    run_time: str | None = None
    setup_time: str | None = None
    anchor_time: str | None = None
    video_links: list[VideoLink] | None = []


class Interview(TrackerRecord):
    type: str | None = "interview"
    id: int
    order: int
    suborder: int | None = None
    social_media: bool | None = None
    interviewers: str | None = None
    topic: str | None = None
    public: bool | None = None
    prerecorded: bool | None = None
    producer: str | None = None
    length: str | None = None
    subjects: str | None = None
    camera_operator: str | None = None


class Segment(pydantic.BaseModel):
    """Interviews that air together right before the run sharing their order."""

    type: Literal["segment"] = "segment"
    id: str
    items: list[Interview]
    starttime: str


ScheduleEntry = Annotated[Union[Run, Segment], pydantic.Field(discriminator="type")]


class Day(pydantic.BaseModel):
    id: str
    date: str
    segments: list[ScheduleEntry] = []


class Schedule(Event):
    """An event with its runs and interview segments grouped by day."""

    type: str | None = "schedule"
    days: list[Day] = []


class KnownEvent(pydantic.BaseModel):
    name: str
    short_name: str


class FetchResult(pydantic.BaseModel, Generic[T]):
    """Outcome of one tracker request.

    A failed request keeps its error message and no items, so callers can
    tell an empty collection from a failed fetch. Records that could not be
    read are left out of ``items`` and described in ``skipped``.
    """

    items: list[T] = []
    error: str | None = None
    skipped: list[str] = []

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_empty(self) -> list[T]:
        return self.items if self.ok else []
