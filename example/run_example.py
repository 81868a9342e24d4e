#!/usr/bin/env python3
"""
Print the schedule of a Games Done Quick event.

    python example/run_example.py 46
    python example/run_example.py 46 --json
"""

import argparse
import sys
import os

# Add parent directory to path so we can import gdq_schedule
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gdq_schedule import InvalidArgument, NotFound, Run, get_event_schedule, get_known_event
from gdq_schedule.logger import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Print a GDQ event schedule")
    parser.add_argument("event_id", type=int, help="tracker event id, e.g. 46 for AGDQ 2024")
    parser.add_argument("--json", action="store_true", help="print the schedule as JSON")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    args = parser.parse_args()

    setup_logging(args.log_level)

    known = get_known_event(args.event_id)
    if known:
        print(f"Fetching schedule for {known.name} ({known.short_name})...", file=sys.stderr)

    try:
        schedule = get_event_schedule(args.event_id)
    except InvalidArgument as e:
        print(e, file=sys.stderr)
        return 2
    except NotFound as e:
        print(e, file=sys.stderr)
        return 1

    if args.json:
        print(schedule.model_dump_json(indent=2))
        return 0

    print(f"{schedule.name} ({schedule.hashtag})")
    for day in schedule.days:
        print(f"\n== {day.id} ({day.date})")
        for entry in day.segments:
            if isinstance(entry, Run):
                runners = ", ".join(runner.name or "?" for runner in entry.runners or [])
                print(f"  {entry.starttime[11:16]}  {entry.display_name or entry.name} - {entry.category} [{runners}]")
            else:
                topics = "; ".join(item.topic or "interview" for item in entry.items)
                print(f"  {entry.starttime[11:16] or '--:--'}  Interview: {topics}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
