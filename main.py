import enum
import sys

from rich.console import Console
from rich.pretty import pprint

from plainarg import *


class Command(enum.Enum):
    build = enum.auto()
    clean = enum.auto()


class Flag(enum.Enum):
    verbose = enum.auto()
    jobs = enum.auto()
    dry_run = enum.auto()


FLAGS = NameTable.for_flags(Flag, [
    FlagInfo(Flag.verbose, short="v"),
    FlagInfo(Flag.jobs, short="j"),
])


def main(tokens):
    cursor = Cursor(tokens)
    command = cursor.expect_enum(Command, expected="a command")

    options = {"command": command, "verbose": False, "jobs": 1, "dry_run": False}
    sub = cursor.fork()
    while (flag := sub.match_flag(FLAGS)) is not None:
        match flag:
            case Flag.verbose:
                options["verbose"] = True
            case Flag.jobs:
                options["jobs"] = sub.expect(uint8)
            case Flag.dry_run:
                options["dry_run"] = True
    options["targets"] = sub.remaining()
    return options


if __name__ == '__main__':
    try:
        pprint(main(sys.argv[1:]))
    except ParseError as fault:
        Console(stderr=True).print(fault)
        sys.exit(1)
