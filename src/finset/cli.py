"""finset CLI: run set operations on comma-separated element lists."""

from __future__ import annotations

import sys

from .core import Set, SetError, equals
from .powerset import DEFAULT_POWER_SET_LIMIT, power_set
from .render import set_string
from .selfcheck import run_selfcheck


USAGE: str = """\
finset COMMAND [OPTIONS] [SET...]

Run a set operation and print the result. A SET is a comma-separated list of
elements; decimal integers become ints, anything else stays a string, and ""
is the empty set.

Commands:
  show SET                 Print the set
  equals SET SET           Print true or false
  union SET SET            Print the union
  intersection SET SET     Print the intersection
  complement SET SET       Print the members of the first set not in the second
  powerset SET             Print every subset, one per line
  selfcheck                Run the built-in consistency checks

Options:
  --limit N    Largest set whose power set is built (default 20, "none" for no cap)
  --help, -h   Show this help message
  --           Treat every later argument as a command or SET, even -h
"""

ARITY: dict[str, int] = {
    "show": 1,
    "equals": 2,
    "union": 2,
    "intersection": 2,
    "complement": 2,
    "powerset": 1,
    "selfcheck": 0,
}


def parse_element(text: str) -> int | str:
    stripped = text.strip()
    body = stripped[1:] if stripped.startswith("-") else stripped
    if body.isdigit() and body.isascii():
        return int(stripped)
    return stripped


def parse_set(text: str) -> Set:
    """Parse "1,2,a" into {1, 2, 'a'}."""
    result: Set = Set()
    if text.strip() == "":
        return result
    for part in text.split(","):
        result.append(parse_element(part))
    return result


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    command: str = ""
    operands: list[str] = []
    limit: int | None = DEFAULT_POWER_SET_LIMIT
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            for rest in args[i + 1 :]:
                if command == "":
                    command = rest
                else:
                    operands.append(rest)
            break
        elif arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--limit":
            if i + 1 >= len(args):
                print("finset: --limit requires a value", file=sys.stderr)
                return 2
            value = args[i + 1]
            if value == "none":
                limit = None
            elif value.isdigit():
                limit = int(value)
            else:
                print("finset: invalid limit '" + value + "'", file=sys.stderr)
                return 2
            i += 2
        elif arg.startswith("--"):
            print("finset: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif command == "":
            command = arg
            i += 1
        else:
            operands.append(arg)
            i += 1
    if command == "":
        print("finset: missing command", file=sys.stderr)
        return 2
    if command not in ARITY:
        print("finset: unknown command '" + command + "'", file=sys.stderr)
        return 2
    if len(operands) != ARITY[command]:
        print(
            f"finset: {command} takes {ARITY[command]} set argument(s), got {len(operands)}",
            file=sys.stderr,
        )
        return 2

    if command == "selfcheck":
        failures = run_selfcheck()
        for failure in failures:
            print("finset: selfcheck: " + failure, file=sys.stderr)
        if failures:
            return 1
        print("ok")
        return 0

    sets = [parse_set(op) for op in operands]
    try:
        if command == "show":
            print(set_string(sets[0]))
        elif command == "equals":
            print("true" if equals(sets[0], sets[1]) else "false")
        elif command == "union":
            print(set_string(sets[0].union(sets[1])))
        elif command == "intersection":
            print(set_string(sets[0].intersection(sets[1])))
        elif command == "complement":
            print(set_string(sets[0].relative_complement(sets[1])))
        elif command == "powerset":
            for sub in power_set(sets[0], limit=limit):
                print(set_string(sub))
    except SetError as e:
        print("finset: error: " + str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
