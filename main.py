import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import config
from catalog import create_default_catalog
from models import ExecutionResult, ValidationResult
from services import execute_decision_tree, validate_decision_tree


def read_payload(source: str) -> str:
    """Accept '-' for stdin, a path to a JSON file, or inline JSON text."""
    if source == "-":
        return sys.stdin.read()
    if source.lstrip().startswith(("{", "[")):
        return source
    path = Path(source)
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return source


def orchestrate_execution(payload: str) -> ExecutionResult:
    """
    Run a tree given as JSON text:
    1. Parse the JSON into a DecisionTree.
    2. Validate the root action.
    3. Execute against the tree's context.

    Failures come back inside the result, never as exceptions.
    """
    return asyncio.run(execute_decision_tree(payload))


def orchestrate_validation(payload: str, deep: bool = config.DEEP_VALIDATION) -> ValidationResult:
    return validate_decision_tree(payload, deep=deep)


def orchestrate_example(name: str) -> ExecutionResult | None:
    """Execute a catalog example by name. Returns None if no such example exists."""
    example = create_default_catalog().get(name)
    if example is None:
        return None
    return asyncio.run(execute_decision_tree(example.tree))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Execute or validate JSON decision trees")
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Validate and execute a decision tree")
    run.add_argument("source", help="Path to a JSON file, '-' for stdin, or inline JSON")

    validate = commands.add_parser("validate", help="Validate a decision tree without executing it")
    validate.add_argument("source", help="Path to a JSON file, '-' for stdin, or inline JSON")
    validate.add_argument(
        "--deep",
        action=argparse.BooleanOptionalAction,
        default=config.DEEP_VALIDATION,
        help="Validate every nested action, not only the root",
    )

    examples = commands.add_parser("examples", help="List or run the bundled example trees")
    examples.add_argument("--run", metavar="NAME", help="Execute the named example")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    args = build_parser().parse_args(argv)

    if args.command == "run":
        result = orchestrate_execution(read_payload(args.source))
        print(json.dumps(result.to_json(), indent=2))
        return 0 if result.success else 1

    if args.command == "validate":
        validation = orchestrate_validation(read_payload(args.source), deep=args.deep)
        print(json.dumps(validation.to_json(), indent=2))
        return 0 if validation.valid else 1

    if args.run:
        result = orchestrate_example(args.run)
        if result is None:
            print(f"No example named {args.run!r}", file=sys.stderr)
            return 1
        print(json.dumps(result.to_json(), indent=2))
        return 0 if result.success else 1

    examples = [example.to_json() for example in create_default_catalog().all()]
    print(json.dumps(examples, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
