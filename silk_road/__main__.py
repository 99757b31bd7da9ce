"""
Silk Road — Command Line
Run a scenario, a JSON script, or commands typed on stdin.
"""

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional

from .core.route import SilkRoad
from .session import Command, CommandResult, ScriptedSession, SCENARIOS, read_script


def positive_int(value: str) -> int:
    length = int(value)
    if length <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return length


def print_result(result: CommandResult):
    tag = "[OK]" if result.ok else "[FAIL]"
    if result.value is not None:
        print(f"{tag} {result.command} = {result.value}")
    else:
        print(f"{tag} {result.command}")


def run_entries(
    session: ScriptedSession,
    entries: Iterable,
    to_command: Callable[..., Optional[Command]] = Command.parse,
) -> int:
    """Execute entries one by one; bad entries are reported and skipped."""
    errors = 0
    for entry in entries:
        try:
            command = to_command(entry)
        except ValueError as e:
            print(f"[ERROR] {e}")
            errors += 1
            continue
        if command is not None:
            print_result(session.execute(command))
    return errors


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="silk-road", description="Silk Road route simulator")
    ap.add_argument("--length", type=positive_int, default=None,
                    help="Route length (ignored with --scenario)")
    ap.add_argument("--script", default="",
                    help="JSON file with a list of commands")
    ap.add_argument("--scenario", default="", choices=[""] + sorted(SCENARIOS),
                    help="Run a built-in scenario")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    errors = 0
    if args.scenario:
        session = ScriptedSession.from_scenario(args.scenario)
        for result in session.run():
            print_result(result)
    elif args.script:
        session = ScriptedSession(road=SilkRoad(args.length))
        try:
            entries = read_script(args.script)
        except ValueError as e:
            print(f"[ERROR] {e}")
            entries = []
            errors += 1
        errors += run_entries(session, entries, Command.from_entry)
    else:
        session = ScriptedSession(road=SilkRoad(args.length))
        errors = run_entries(session, sys.stdin)

    road = session.road
    print(f"stores={road.store_count()} robots={road.robot_count()} "
          f"profit={road.profit()} ok={road.ok()}")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
