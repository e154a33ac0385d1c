from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from src.models.configs import GitRepository, IndexSettings
from src.orchestration.config_loader import load_repository_config
from src.orchestration.constants import suggested_instructions
from src.orchestration.workflow import StandardsWorkflow


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="std-index", description="Index and manage standards libraries.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: STD_INDEX_LOG_LEVEL or INFO)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Sync and index a standards library")
    sync_parser.add_argument("-r", "--repository", help="Git repository URL to clone")
    refs = sync_parser.add_mutually_exclusive_group()
    refs.add_argument("-b", "--branch", help="Branch to checkout")
    refs.add_argument("-t", "--tag", help="Tag to checkout")
    sync_parser.add_argument(
        "--config",
        type=Path,
        help="YAML, TOML or JSON file describing the repository (flags take precedence)",
    )

    index_parser = subparsers.add_parser("index", help="Index an already synced standards library")

    for sub in (sync_parser, index_parser):
        sub.add_argument(
            "--clone-path",
            type=Path,
            help="Directory holding the standards library (default: STD_INDEX_CLONE_PATH or .stdidx)",
        )
        sub.add_argument(
            "-o",
            "--output",
            type=Path,
            help="Where to write the standards tree (default: STD_INDEX_OUTPUT or standards-tree.yaml)",
        )

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def _resolve_repository(args: argparse.Namespace, settings: IndexSettings) -> GitRepository:
    values: dict[str, object] = {"clone_path": settings.clone_path}
    if args.config:
        values.update(load_repository_config(args.config).model_dump(exclude_unset=True))
    if args.repository:
        values["repository"] = args.repository
    if args.branch:
        values.update(branch=args.branch, tag=None)
    if args.tag:
        values.update(tag=args.tag, branch=None)
    if args.clone_path:
        values["clone_path"] = args.clone_path
    if not values.get("repository"):
        raise ValueError("a repository is required: pass --repository or --config")
    return GitRepository.model_validate(values)


def main(argv: list[str] | None = None) -> int:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = IndexSettings()
    except ValidationError as exc:
        configure_logging("INFO")
        logger.error("invalid std-index settings: %s", exc)
        return 1
    configure_logging("DEBUG" if args.verbose else (args.log_level or settings.log_level))

    output_path = args.output or settings.output_path

    try:
        if args.command == "sync":
            repository = _resolve_repository(args, settings)
            workflow = StandardsWorkflow(clone_path=repository.clone_path, output_path=output_path)
            workflow.sync(repository)
        elif args.command == "index":
            workflow = StandardsWorkflow(
                clone_path=args.clone_path or settings.clone_path,
                output_path=output_path,
            )
            workflow.index()
        else:
            parser.error(f"Unknown command {args.command}")
    except Exception as exc:
        logger.error("failed to run std-index: %s", exc)
        return 1

    print("\nDon't forget to instruct your agent to use the standards index. Suggested prompt:")
    print("\n" + suggested_instructions(str(output_path)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
