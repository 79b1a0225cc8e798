from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import calschema

log = logging.getLogger(__name__)


def parse_calendars(s: str) -> List[str]:
    # "gregorian,julian" -> ["gregorian", "julian"]
    return [x.strip() for x in s.split(",") if x.strip()]


def check_calendar(name: str, start_year: int, end_year: int, *, max_failures: int = 10) -> int:
    """
    Walks every day of [start_year, end_year] and checks that
      - day number -> date -> day number is the identity,
      - next_day() agrees with the day number + 1,
      - the ordinal form round-trips.
    Returns the number of failures.
    """
    cal = calschema.get_calendar(name)
    arith = cal.arithmetic
    n0 = cal.to_day_number(cal.start_of_year(start_year))
    n1 = cal.to_day_number(cal.end_of_year(end_year))
    log.debug("round-trip %s: day numbers %d..%d", name, n0, n1)

    failures = 0
    prev = None
    for n in range(n0, n1 + 1):
        p = cal.from_day_number(n)
        problems = []
        if cal.to_day_number(p) != n:
            problems.append(f"to_day_number -> {cal.to_day_number(p)}")
        if cal.from_ordinal(cal.to_ordinal(p)) != p:
            problems.append(f"ordinal -> {cal.to_ordinal(p)}")
        if prev is not None and arith.next_day(prev) != p:
            problems.append(f"next_day({prev}) -> {arith.next_day(prev)}")
        if problems:
            failures += 1
            print("\nFAIL")
            print("calendar:", name)
            print("day number:", n)
            print("date:", p)
            for msg in problems:
                print("  ", msg)
            if failures >= max_failures:
                return failures
        prev = p
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Day-by-day round-trip check of calendar conversions.")
    p.add_argument("--calendars", default="", help="Comma list of calendars (default: all).")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    names = parse_calendars(args.calendars) or calschema.list_calendars()
    total = 0
    for name in names:
        failures = check_calendar(name, args.start_year, args.end_year, max_failures=args.max_failures)
        status = "OK" if failures == 0 else f"{failures} failure(s)"
        print(f"{name:<22} {args.start_year}..{args.end_year}: {status}")
        total += failures
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
