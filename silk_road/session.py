"""
Silk Road — Command Session
Drives a route from text commands or scripts, one operation at a time.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union
import json
import logging

from .core.route import SilkRoad

logger = logging.getLogger(__name__)


# name -> (arity, is_query)
OPERATIONS: Dict[str, Tuple[int, bool]] = {
    # Stores
    "place_store": (2, False),
    "remove_store": (1, False),
    "resupply_stores": (0, False),

    # Robots
    "place_robot": (1, False),
    "remove_robot": (1, False),
    "move_robot": (2, False),
    "return_robots": (0, False),

    # Whole route
    "reboot": (0, False),
    "finish": (0, False),
    "make_visible": (0, False),
    "make_invisible": (0, False),

    # Queries
    "profit": (0, True),
    "store_count": (0, True),
    "robot_count": (0, True),
    "ok": (0, True),
}

ALIASES: Dict[str, str] = {
    # Generic vocabulary
    "place_agent": "place_robot",
    "remove_agent": "remove_robot",
    "move_agent": "move_robot",
    "return_agents": "return_robots",
    "agent_count": "robot_count",
    "last_operation_succeeded": "ok",

    # camelCase names
    "placeStore": "place_store",
    "removeStore": "remove_store",
    "resupplyStores": "resupply_stores",
    "placeRobot": "place_robot",
    "removeRobot": "remove_robot",
    "moveRobot": "move_robot",
    "returnRobots": "return_robots",
    "makeVisible": "make_visible",
    "makeInvisible": "make_invisible",
    "stores": "store_count",
    "robots": "robot_count",
    "placeAgent": "place_robot",
    "removeAgent": "remove_robot",
    "moveAgent": "move_robot",
    "returnAgents": "return_robots",
    "storeCount": "store_count",
    "robotCount": "robot_count",
    "agentCount": "robot_count",
    "lastOperationSucceeded": "ok",
}


def read_script(filepath: str) -> list:
    """Read the raw entries of a JSON script file."""
    with open(filepath, 'r') as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"Script must be a JSON list: {filepath}")
    return entries


@dataclass(frozen=True)
class Command:
    """A single operation to run against a route."""
    operation: str
    args: Tuple[int, ...] = ()

    @classmethod
    def create(cls, name: str, args: Iterable[int] = ()) -> "Command":
        """Build a command, resolving aliases and checking arity."""
        operation = ALIASES.get(name, name)
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {name}")

        args = tuple(args)
        for a in args:
            if isinstance(a, bool) or not isinstance(a, int):
                raise ValueError(f"Arguments must be integers: {a!r}")
        arity, _ = OPERATIONS[operation]
        if len(args) != arity:
            raise ValueError(f"{operation} takes {arity} argument(s), got {len(args)}")

        return cls(operation=operation, args=args)

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        """
        Parse a text command such as "place_store 3 50".

        Returns:
            The command, or None for blank lines and # comments.
        """
        line = line.split("#", 1)[0].strip()
        if not line:
            return None

        name, *raw_args = line.split()
        try:
            args = [int(a) for a in raw_args]
        except ValueError:
            raise ValueError(f"Arguments must be integers: {line!r}") from None
        return cls.create(name, args)

    @classmethod
    def from_entry(cls, entry) -> Optional["Command"]:
        """
        Build a command from one JSON script entry: either a text command
        or a dict with "operation" and an optional "args" list.
        """
        if isinstance(entry, str):
            return cls.parse(entry)
        if not isinstance(entry, dict) or not isinstance(entry.get("operation"), str):
            raise ValueError(f"Bad script entry: {entry!r}")

        args = entry.get("args", [])
        if not isinstance(args, list):
            raise ValueError(f"Bad script entry: {entry!r}")
        return cls.create(entry["operation"], args)

    @property
    def is_query(self) -> bool:
        return OPERATIONS[self.operation][1]

    def __str__(self) -> str:
        return " ".join([self.operation, *(str(a) for a in self.args)])


@dataclass
class CommandResult:
    """Outcome of running one command."""
    command: Command
    ok: bool
    value: Optional[Union[int, bool]] = None

    def get_summary(self) -> dict:
        return {
            "command": str(self.command),
            "ok": self.ok,
            "value": self.value,
        }


@dataclass
class ScriptedSession:
    """
    Runs a fixed list of commands against a route.

    Used for:
    - Reproducible scenarios
    - Driving the route from the command line
    """

    road: SilkRoad
    script: List[Command] = field(default_factory=list)
    history: List[CommandResult] = field(default_factory=list)

    def execute(self, command: Command) -> CommandResult:
        """Run one command and record its result."""
        value = getattr(self.road, command.operation)(*command.args)
        if command.is_query:
            result = CommandResult(command, ok=self.road.ok(), value=value)
        else:
            result = CommandResult(command, ok=value)

        logger.debug(f"{command} -> {'OK' if result.ok else 'FAIL'}")
        self.history.append(result)
        return result

    def run(self) -> List[CommandResult]:
        """Run the whole script."""
        return [self.execute(command) for command in self.script]

    @classmethod
    def from_lines(cls, lines: Iterable[str], road: Optional[SilkRoad] = None) -> "ScriptedSession":
        """Build a session from text commands."""
        script = [c for c in (Command.parse(line) for line in lines) if c is not None]
        return cls(road=road if road is not None else SilkRoad(), script=script)

    @classmethod
    def from_json(cls, filepath: str, road: Optional[SilkRoad] = None) -> "ScriptedSession":
        """
        Load a script from a JSON file.

        Script format:
        [
            {"operation": "place_store", "args": [3, 50]},
            "move_robot 3 4",
            ...
        ]
        """
        script = [c for c in (Command.from_entry(e) for e in read_script(filepath)) if c is not None]

        logger.info(f"Loaded {len(script)} command(s) from {filepath}")
        return cls(road=road if road is not None else SilkRoad(), script=script)

    @classmethod
    def from_scenario(cls, scenario_name: str) -> "ScriptedSession":
        """
        Create a session from a built-in scenario.

        Scenarios:
        - "basic": placement, a rejected duplicate, moves and a reboot
        - "reset": resupply, return and finish
        - "bounds": placements and moves at the route edges
        """
        if scenario_name not in SCENARIOS:
            raise ValueError(f"Unknown scenario: {scenario_name}")

        scenario = SCENARIOS[scenario_name]
        return cls.from_lines(scenario["commands"], road=SilkRoad(scenario["length"]))


SCENARIOS: Dict[str, dict] = {
    "basic": {
        "length": 10,
        "commands": [
            "place_store 3 50",
            "place_store 3 20",
            "place_robot 3",
            "move_robot 3 4",
            "move_robot 3 4",
            "reboot",
            "profit",
        ],
    },
    "reset": {
        "length": 20,
        "commands": [
            "place_store 2 100",
            "place_store 15 30",
            "place_robot 0",
            "place_robot 10",
            "move_robot 0 5",
            "move_robot 10 -3",
            "resupply_stores",
            "return_robots",
            "finish",
            "store_count",
            "robot_count",
        ],
    },
    "bounds": {
        "length": 5,
        "commands": [
            "place_store -1 10",
            "place_store 5 10",
            "place_store 4 10",
            "place_robot 0",
            "move_robot 0 -1",
            "move_robot 0 5",
            "move_robot 0 4",
            "remove_robot 2",
            "robot_count",
        ],
    },
}
