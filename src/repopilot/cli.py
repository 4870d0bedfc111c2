"""Command-line interface for repopilot."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from repopilot import (
    AccessDeniedError,
    AuthenticationError,
    ConfigError,
    InvalidArgumentError,
    NotFoundError,
    OperationResult,
    RepoPilot,
    ServiceUnavailableError,
    load_config,
)


def _package_version() -> str:
    try:
        return version("repopilot")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repopilot")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", required=True, help="Path to repopilot.json")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check-access", parents=[common], help="Verify read and write access")

    branch_parser = subparsers.add_parser("create-branch", parents=[common], help="Create a branch")
    branch_parser.add_argument("--project", required=True, help="Project full path")
    branch_parser.add_argument("--base", required=True, help="Ref to branch from")
    branch_parser.add_argument("--branch", required=True, help="Name of the new branch")

    commit_parser = subparsers.add_parser("commit", parents=[common], help="Create or update a file")
    commit_parser.add_argument("--project", required=True, help="Project full path")
    commit_parser.add_argument("--branch", required=True, help="Branch to commit to")
    commit_parser.add_argument("--file", required=True, help="Path of the file in the repository")
    content = commit_parser.add_mutually_exclusive_group(required=True)
    content.add_argument("--content", help="File content")
    content.add_argument("--content-file", type=Path, help="Local file holding the content")
    commit_parser.add_argument("--create", action="store_true", help="Create the file before updating it")
    commit_parser.add_argument("--create-message", required=True, help="Commit message for the creation")
    commit_parser.add_argument("--update-message", required=True, help="Commit message for the update")

    merge_parser = subparsers.add_parser("merge-request", parents=[common], help="Open a merge request")
    merge_parser.add_argument("--project", required=True, help="Project full path")
    merge_parser.add_argument("--source", required=True, help="Source branch")
    merge_parser.add_argument("--base", required=True, help="Target branch")
    merge_parser.add_argument("--title", required=True, help="Merge request title")

    return parser


def _read_content(args: argparse.Namespace) -> str:
    if args.content_file is None:
        return str(args.content)
    try:
        return Path(args.content_file).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading content file: {args.content_file}") from exc


async def _run(args: argparse.Namespace) -> OperationResult | None:
    config = load_config(args.config)
    async with RepoPilot.from_config(config) as pilot:
        service = pilot.service
        if args.command == "check-access":
            await service.require_access()
            return None
        if args.command == "create-branch":
            return await service.create_branch(args.project, args.base, args.branch)
        if args.command == "commit":
            return await service.commit(
                args.project,
                args.branch,
                args.file,
                _read_content(args),
                args.create,
                args.create_message,
                args.update_message,
            )
        return await service.create_merge_request(args.project, args.source, args.base, args.title)


def _format_summary(command: str, result: OperationResult | None) -> str:
    if result is None:
        return f"repopilot - {command}: read and write access verified"

    status = "ok" if result.successful() else "failed"
    lines = [f"repopilot - {command}: {status}"]
    if result.url:
        lines.append(f"  URL:     {result.url}")
    for error in result.errors:
        lines.append(f"  Error:   {error}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = asyncio.run(_run(args))
    except (ConfigError, InvalidArgumentError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, AccessDeniedError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (ServiceUnavailableError, NotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_format_summary(args.command, result))
    if result is not None and not result.successful():
        return 2
    return 0
