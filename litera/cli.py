"""
Litera CLI - Command-line front end for the sync engine.

Usage:
    litera scenarios                                  List modules and options
    litera start [--session ID]                       Start or resume a session
    litera submit [--session ID] MODULE ACTION [JSON] Submit a raw action
    litera choose [--session ID] SCENARIO OPTION      Choose a scenario option

Global options --backend, --timeout and --log-level override the
LITERA_* environment variables.
"""

from __future__ import annotations
import argparse
import asyncio
import json
import logging
import sys

import httpx

from .config import LiteraConfig
from .engine_core.action import ActionRequest
from .engine_core.state import METER_LABELS, ProgressState
from .modules import ALL_SCENARIOS, get_scenario
from .session import ScoringSyncEngine, SyncResult
from .api.client import ScoringClient

BAR_WIDTH = 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Litera - Media Literacy, Ethics, and Professional Communication",
        prog="litera",
    )
    parser.add_argument("--backend", help="Scoring service base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Scenarios command
    subparsers.add_parser("scenarios", help="List modules, scenarios and options")

    # Start command
    start_parser = subparsers.add_parser("start", help="Start or resume a session")
    start_parser.add_argument("--session", default="", help="Session identifier to resume")

    # Submit command
    submit_parser = subparsers.add_parser("submit", help="Submit a raw action")
    submit_parser.add_argument("--session", default="", help="Session identifier")
    submit_parser.add_argument("module", help="Module identifier, e.g. prebunking")
    submit_parser.add_argument("action_type", help="Action type, e.g. label_post")
    submit_parser.add_argument("payload", nargs="?", default="{}", help="JSON object payload")

    # Choose command
    choose_parser = subparsers.add_parser("choose", help="Choose a scenario option")
    choose_parser.add_argument("--session", default="", help="Session identifier")
    choose_parser.add_argument("scenario_id", help="Scenario id, e.g. p1")
    choose_parser.add_argument("option_id", help="Option id, e.g. hoax")

    return parser


def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = LiteraConfig.from_env()
        logging.basicConfig(level=resolve_log_level(args.log_level or config.log_level))
        if args.timeout is not None and args.timeout <= 0:
            raise ValueError(f"--timeout must be positive, got {args.timeout:g}")

        if args.command == "scenarios":
            return cmd_scenarios(args)
        return asyncio.run(run_session_command(args, config, transport))
    except (ValueError, KeyError) as e:
        print(f"Error: {e}")
        return 2


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name!r}")
    return level


def cmd_scenarios(args) -> int:
    """List the built-in scenarios."""
    for scenario in ALL_SCENARIOS.values():
        print(f"[{scenario.module.value}] {scenario.scenario_id}: {scenario.title}")
        print(f"  {scenario.content}")
        for key, value in scenario.metadata.items():
            print(f"  {key}: {value}")
        for option in scenario.options:
            print(f"    {option.option_id:<12} {option.label}")
        print()
    return 0


async def run_session_command(
    args,
    config: LiteraConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run start/submit/choose against one engine and print the result."""
    client = ScoringClient(
        base_url=args.backend or config.backend_url,
        timeout=args.timeout if args.timeout is not None else config.request_timeout,
        transport=transport,
    )
    async with client:
        engine = ScoringSyncEngine(client=client, config=config)
        engine.set_identifier(args.session)

        if args.command == "start":
            result = await engine.start_session()
        elif args.command == "submit":
            action = ActionRequest(args.module, args.action_type, parse_payload(args.payload))
            result = await engine.submit_action(action)
        else:
            action = get_scenario(args.scenario_id).action_for(args.option_id)
            result = await engine.start_session()
            if result.applied:
                result = await engine.submit_action(action)

        print_view(engine, result)
    return 0 if result.applied else 1


def parse_payload(raw: str) -> dict:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"payload is not valid JSON: {e}")
    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")
    return payload


def render_meter(label: str, value) -> str:
    """One meter line. The value is shown verbatim; only the bar is clamped."""
    filled = round(max(0, min(100, value)) * BAR_WIDTH / 100)
    bar = "#" * filled + "." * (BAR_WIDTH - filled)
    return f"{label:<20} {value:>5}  [{bar}]"


def render_relationships(progress: ProgressState) -> str:
    if not progress.relationships:
        return "no interactions yet"
    return json.dumps(progress.relationships, sort_keys=True)


def print_view(engine: ScoringSyncEngine, result: SyncResult):
    view = engine.view()
    print(f"Session: {view.identifier or '(none)'}")
    for name, value in view.progress.meters().items():
        print(render_meter(METER_LABELS[name], value))
    print(f"Relationships: {render_relationships(view.progress)}")
    print(f"Status: {result.status}")


if __name__ == "__main__":
    sys.exit(main())
