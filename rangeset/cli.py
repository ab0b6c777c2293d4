from typing import Any, List, Optional, TypeAlias
import sys
import os
import argparse
import logging

import yaml

from rangeset.config import ConfigError, ScenarioConfig, load_config
from rangeset.messages import error, show_membership, show_ranges, success
from rangeset.range import InvalidRangeError

##################################################################################################
# Main
##################################################################################################

ArgParser: TypeAlias = argparse.ArgumentParser

class Commands:
    def __init__(self, parser: ArgParser) -> None:
        self.subparsers = parser.add_subparsers(dest='command')

    class Command:
        def __init__(self, commands: 'Commands', name: str, help: Optional[str] = None) -> None:
            self.parser = commands.subparsers.add_parser(name, help=help)

        def __enter__(self) -> ArgParser:
            return self.parser

        def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
            pass

    def __call__(self, name: str, help: Optional[str] = None) -> Any:
        return Commands.Command(self, name, help)


def build_parser() -> ArgParser:
    parser = argparse.ArgumentParser(prog='rangeset', description='Coalescing interval sets')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every merge decision.')
    commands = Commands(parser)

    with commands('demo', help='Replay the built-in insertion demo.') as cmd:
        cmd.add_argument('--quiet', action='store_true', help='Only print the final set.')

    with commands('run', help='Apply a scenario file and print the set after each step.') as cmd:
        cmd.add_argument('scenario', type=str, nargs=1, help='YAML scenario file.')

    with commands('contains', help='Check whether a value is covered after a scenario.') as cmd:
        cmd.add_argument('scenario', type=str, nargs=1, help='YAML scenario file.')
        cmd.add_argument('value', type=str, nargs=1, help='Value to look up, in the scenario\'s domain.')

    return parser


def _parse_value(config: ScenarioConfig, raw: str) -> Any:
    # Command line values arrive as text; reuse the YAML scalar rules, but
    # '1' is still a character in the char domain
    try:
        return config.coerce(yaml.safe_load(raw))
    except (ConfigError, yaml.YAMLError):
        return config.coerce(raw)


def main(argv: Optional[List[str]] = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    from rangeset.scenario import demo_config, run_scenario

    try:
        match args.command:
            case 'demo':
                rangeset, _ = run_scenario(demo_config(), echo=not args.quiet)
                if args.quiet:
                    show_ranges("Final set:", rangeset)

            case 'run':
                config = load_config(args.scenario[0])
                rangeset, _ = run_scenario(config)
                success(f"{len(rangeset)} interval(s) after {len(config.steps)} step(s)")

            case 'contains':
                config = load_config(args.scenario[0])
                rangeset, _ = run_scenario(config, echo=False)
                value = _parse_value(config, args.value[0])
                member = rangeset.contains_point(value)
                show_membership(value, member)
                return 0 if member else 2

            case _:
                raise ValueError(f"Unknown command: {args.command}")
    except (InvalidRangeError, ConfigError) as e:
        error(str(e))
        return 1

    return 0
