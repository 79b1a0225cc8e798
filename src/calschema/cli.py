from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import CalschemaError
from .core.types import ADDITION_RULES, DateParts


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,3})$")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _parse_date(s: str) -> DateParts:
    """Parses Y-M-D; the year may be negative or have any number of digits."""
    match = _DATE_RE.match(s)
    if match is None:
        raise argparse.ArgumentTypeError(f"invalid date '{s}', expected Y-M-D")
    y, m, d = (int(g) for g in match.groups())
    return DateParts(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_list(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema list", description="List registered calendars")
    p.parse_args(argv)
    for name in calschema.list_calendars():
        info = calschema.calendar_info(name)
        print(f"{name:<22} {info['schema']:<26} {info['min_date']} .. {info['max_date']}")
    return 0


def cmd_info(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema info", description="Show calendar characteristics")
    p.add_argument("calendar")
    args = p.parse_args(argv)

    for key, value in calschema.calendar_info(args.calendar).items():
        print(f"{key:<18} {value}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema convert", description="Convert a date between calendars")
    p.add_argument("date", type=_parse_date, help="Y-M-D")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", dest="target", required=True)
    args = p.parse_args(argv)

    print(calschema.convert(args.date, source=args.source, target=args.target))
    return 0


def cmd_describe(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema describe", description="Describe a date")
    p.add_argument("date", type=_parse_date, help="Y-M-D")
    p.add_argument("--cal", default="gregorian")
    args = p.parse_args(argv)

    for key, value in calschema.describe(args.date, calendar=args.cal).items():
        print(f"{key:<18} {value}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema add", description="Add days, months or years to a date")
    p.add_argument("date", type=_parse_date, help="Y-M-D")
    p.add_argument("--cal", default="gregorian")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--days", type=int)
    g.add_argument("--months", type=int)
    g.add_argument("--years", type=int)
    p.add_argument("--rule", choices=ADDITION_RULES, default=None, help="addition rule for months/years")
    args = p.parse_args(argv)

    if args.days is not None:
        result = calschema.add_days(args.date, args.days, calendar=args.cal)
    elif args.months is not None:
        result = calschema.add_months(args.date, args.months, calendar=args.cal, rule=args.rule)
    else:
        result = calschema.add_years(args.date, args.years, calendar=args.cal, rule=args.rule)
    print(result)
    return 0


def cmd_between(argv: list[str]) -> int:
    import calschema

    p = argparse.ArgumentParser(prog="calschema between", description="Count the days between two dates")
    p.add_argument("start", type=_parse_date, help="Y-M-D")
    p.add_argument("end", type=_parse_date, help="Y-M-D")
    p.add_argument("--cal", default="gregorian")
    args = p.parse_args(argv)

    print(calschema.days_between(args.start, args.end, calendar=args.cal))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calschema", description="Calendrical schemas and date arithmetic.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("info", help="Show calendar characteristics")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("describe", help="Describe a date (leap year, intercalary day, ...)")
    sub.add_parser("add", help="Add days, months or years to a date")
    sub.add_parser("between", help="Count the days between two dates")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt="%H:%M:%S")

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "convert": cmd_convert,
        "describe": cmd_describe,
        "add": cmd_add,
        "between": cmd_between,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calschema.diagnostics.round_trip",
                "year-lengths": "calschema.diagnostics.year_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (CalschemaError, KeyError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"error: {msg}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
