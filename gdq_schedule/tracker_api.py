"""Requests against the GDQ tracker API.

Every request either succeeds with the validated ``results`` of the response
or fails into a :class:`FetchResult` carrying the error and no items. A record
that fails validation is skipped on its own and the rest are kept. Nothing
raises past this module; the ``get_*`` helpers collapse failures to an empty
list.
"""

import pydantic
import requests

from .config import config
from .logger import get_logger
from .models import Event, FetchResult, Interview, Run

logger = get_logger(__name__)

FETCH_ERRORS = (
    requests.RequestException,
    ValueError,  # non-JSON body
    KeyError,
    TypeError,
)


def _validate_records(url: str, results, model: type[pydantic.BaseModel]) -> tuple[list, list[str]]:
    if not isinstance(results, list):
        raise TypeError(f"results is {type(results).__name__}, not a list")
    items, skipped = [], []
    for index, record in enumerate(results):
        try:
            items.append(model.model_validate(record))
        except pydantic.ValidationError as e:
            logger.warning(f"[fetch] {url} skipped record {index}: {e.error_count()} invalid field(s)")
            skipped.append(f"record {index}: {e}")
    return items, skipped


def _fetch_results(path: str, model: type[pydantic.BaseModel]) -> FetchResult:
    url = f"{config.TRACKER_API_URL.rstrip('/')}/{path}"
    try:
        response = requests.get(url, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        items, skipped = _validate_records(url, response.json()["results"], model)
    except FETCH_ERRORS as e:
        logger.warning(f"[fetch] {url} failed: {e!r}")
        return FetchResult(error=f"{type(e).__name__}: {e}")
    logger.debug(f"[fetch] {len(items)} results from {url}")
    return FetchResult(items=items, skipped=skipped)


def fetch_events() -> FetchResult:
    return _fetch_results("events/", Event)


def fetch_runs(event_id: int) -> FetchResult:
    """Fetch the runs of an event, sorted by their ``order``."""
    result = _fetch_results(f"events/{event_id}/runs/", Run)
    if not result.ok:
        return result
    return FetchResult(items=sorted(result.items, key=lambda run: run.order), skipped=result.skipped)


def fetch_interviews(event_id: int) -> FetchResult:
    # Left in API order; interviews are placed relative to runs when folding.
    return _fetch_results(f"events/{event_id}/interviews/", Interview)


def get_events() -> list[Event]:
    return fetch_events().or_empty()


def get_runs(event_id: int) -> list[Run]:
    return fetch_runs(event_id).or_empty()


def get_interviews(event_id: int) -> list[Interview]:
    return fetch_interviews(event_id).or_empty()
