"""Tagfeed CLI entry points.
This module exposes commands for serving the API and replaying datasets.
It maps argparse commands onto dataset service calls.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Any, Sequence

from api.example_payload import build_example_document
from core.config import TagfeedConfig
from core.errors import TagfeedError
from core.serialization import json_safe
from ingest.payload_reader import read_source_bytes
from store.dataset_service import DatasetService


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="tagfeed", description="Tagfeed dataset replay CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_serve_command(subparsers)
    _add_inspect_command(subparsers)
    _add_replay_command(subparsers)
    _add_example_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Tagfeed CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = TagfeedConfig.from_env()
    if args.command == "serve":
        return _run_serve_command(config, args)
    if args.command == "inspect":
        return _run_inspect_command(config, args)
    if args.command == "replay":
        return _run_replay_command(config, args)
    if args.command == "example":
        return _run_example_command()
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_serve_command(config: TagfeedConfig, args: argparse.Namespace) -> int:
    """Handle serve command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    import uvicorn

    from api.app import create_app

    if args.host:
        config = replace(config, host=args.host)
    if args.port is not None:
        config = replace(config, port=args.port)
    uvicorn.run(create_app(DatasetService(), config), host=config.host, port=config.port)
    return 0


def _run_inspect_command(config: TagfeedConfig, args: argparse.Namespace) -> int:
    """Handle inspect command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    service = DatasetService()
    if not _load_source(service, args.source, config):
        return 1
    print(json.dumps(json_safe(service.get_info().to_payload()), indent=2))
    return 0


def _run_replay_command(config: TagfeedConfig, args: argparse.Namespace) -> int:
    """Handle replay command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    service = DatasetService()
    if args.source and not _load_source(service, args.source, config):
        return 1
    for _ in range(args.count):
        print(json.dumps(json_safe(service.get_next())))
    return 0


def _run_example_command() -> int:
    """Handle example command."""
    print(json.dumps(build_example_document(), indent=2))
    return 0


def _load_source(service: DatasetService, source: str, config: TagfeedConfig) -> bool:
    """Read a source and ingest it, reporting failures on stderr.

    Args:
        service: Service whose dataset is replaced.
        source: Local path or S3 URI.
        config: Runtime configuration.

    Returns:
        Whether the dataset was replaced.
    """
    try:
        raw_bytes = read_source_bytes(source, config)
    except TagfeedError as error:
        print(str(error), file=sys.stderr)
        return False
    result = service.ingest_from_bytes(raw_bytes, source)
    if not result.success:
        print(result.message, file=sys.stderr)
    return result.success


def _add_serve_command(subparsers: Any) -> None:
    """Register serve subcommand."""
    parser = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    parser.add_argument("--host", help="Override TAGFEED_HOST for this command")
    parser.add_argument("--port", type=int, help="Override TAGFEED_PORT for this command")


def _add_inspect_command(subparsers: Any) -> None:
    """Register inspect subcommand."""
    parser = subparsers.add_parser("inspect", help="Ingest a JSON file and print its summary")
    parser.add_argument("source", help="Local JSON file or s3://bucket/key")


def _add_replay_command(subparsers: Any) -> None:
    """Register replay subcommand."""
    parser = subparsers.add_parser("replay", help="Print records in round-robin order")
    parser.add_argument("--source", help="Local JSON file or s3://bucket/key; sample if omitted")
    parser.add_argument("--count", type=int, default=1, help="Number of records to print")


def _add_example_command(subparsers: Any) -> None:
    """Register example subcommand."""
    subparsers.add_parser("example", help="Print an example upload payload")
