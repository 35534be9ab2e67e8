"""
Command-line entry point.

Usage (from project root, after installing in editable mode):

    python -m tarock                 # one deal, result record printed
    python -m tarock --seed 7        # reproducible deal
    python -m tarock --deals 1000    # statistics over many deals
"""
from __future__ import annotations

import argparse
import json
import logging
from pprint import pprint
from typing import Optional, Sequence

from .deal import RandomSource
from .game import play_one_deal
from .persistence import result_to_dict, save_results
from .stats import SimulationConfig, simulate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tarock",
        description="Simulate deals of three-player tarock.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility.",
    )
    parser.add_argument(
        "--deals",
        type=int,
        default=None,
        help="Run this many deals and print summary statistics instead of one result.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print output as JSON.",
    )
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Write every deal result to this JSON file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log auction, talon and trick details to stderr.",
    )
    return parser


def _cmd_single_deal(args: argparse.Namespace) -> None:
    result = play_one_deal(rng=RandomSource(args.seed))
    record = result_to_dict(result)
    if args.json:
        print(json.dumps(record))
    else:
        pprint(record)
    if args.save:
        save_results(args.save, [result])


def _cmd_simulate(args: argparse.Namespace) -> None:
    cfg = SimulationConfig(num_deals=args.deals, seed=args.seed if args.seed is not None else 0)
    summary = simulate(cfg)
    if args.json:
        print(json.dumps(summary.as_dict()))
    else:
        pprint(summary.as_dict())
    if args.save:
        save_results(args.save, summary.results)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.deals is not None:
        _cmd_simulate(args)
    else:
        _cmd_single_deal(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
