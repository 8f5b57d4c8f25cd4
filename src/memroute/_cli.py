"""Memroute CLI — memroute match / memroute simulate.

Entry point for the ``memroute`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from memroute._errors import MemrouteError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the memroute CLI."""
    parser = argparse.ArgumentParser(
        prog="memroute",
        description="In-memory navigation history and route matching.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # memroute match
    match_parser = subparsers.add_parser(
        "match",
        help="Check a route pattern against a location",
    )
    match_parser.add_argument("pattern", help="Route pattern, e.g. /users/:id")
    match_parser.add_argument("location", help="Location to test, e.g. /users/42")
    match_parser.add_argument("--exact", action="store_true", help="Require an exact match")
    match_parser.add_argument(
        "--exact-params", action="store_true", help="Require the parameter count to match",
    )

    # memroute simulate
    simulate_parser = subparsers.add_parser(
        "simulate",
        help="Apply navigation operations and print the resulting state",
    )
    simulate_parser.add_argument("root", nargs="?", default=".", help="Directory holding memroute.yaml")
    simulate_parser.add_argument(
        "--op",
        dest="ops",
        action="append",
        default=[],
        metavar="OP",
        help="push:/path, replace:/path, back, forward or go:N (repeatable)",
    )
    simulate_parser.add_argument(
        "--single-route", action="store_true", default=None, help="Keep only the first match",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from memroute import __version__

    return __version__


def _parse_op(op: str) -> tuple[str, tuple[object, ...]]:
    """Turn ``push:/x`` style operations into a controller call."""
    name, _, arg = op.partition(":")
    if name == "push":
        return "push_state", (arg,)
    if name == "replace":
        return "replace_state", (arg,)
    if name == "go":
        try:
            return "go", (int(arg),)
        except ValueError:
            msg = f"go needs an integer index, got {arg!r}"
            raise argparse.ArgumentTypeError(msg) from None
    if name in ("back", "forward") and not arg:
        return name, ()
    msg = f"Unknown operation {op!r}"
    raise argparse.ArgumentTypeError(msg)


def _run_match(args: argparse.Namespace) -> int:
    from memroute.routing import RouteDescriptor, extract_params, strategy

    descriptor = RouteDescriptor(pattern=args.pattern, exact=args.exact, exact_params=args.exact_params)
    if not strategy(descriptor, args.location):
        print("no match")
        return 1
    print("match")
    for label, value in extract_params(args.pattern, args.location).items():
        print(f"  {label} = {value}")
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from memroute.config_loader import load_config
    from memroute.controller import RouteController
    from memroute.observability import NavigationCollector

    calls = [_parse_op(op) for op in args.ops]
    config = load_config(Path(args.root), single_route=args.single_route)
    collector = NavigationCollector()
    controller = RouteController(config, collector=collector)
    for operation, op_args in calls:
        controller.navigate(operation, *op_args)  # type: ignore[arg-type]

    stack = controller.stack
    print(f"location: {controller.location()}")
    print(f"position: {stack.position}")
    for i, entry in enumerate(stack.entries):
        marker = "*" if i == stack.position else " "
        print(f" {marker} [{i}] {entry}")
    trail = collector.log.trail()
    if trail:
        print("trail: " + " -> ".join(str(path) for path in trail))
    for match in controller.resolution().matches:
        pattern = match.descriptor.pattern or "(catch-all)"
        params = ", ".join(f"{k}={v}" for k, v in match.params.items())
        print(f"active: {pattern}" + (f" ({params})" if params else ""))
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "match":
            code = _run_match(args)
        else:
            code = _run_simulate(args)
    except (MemrouteError, argparse.ArgumentTypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    sys.exit(code)


if __name__ == "__main__":
    main()
