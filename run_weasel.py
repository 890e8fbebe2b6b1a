#!/usr/bin/env python3
"""
Weasel runner
Evolves a random string into the given phrase with the Weasel genetic algorithm,
printing the best candidate of each generation.

Usage: python3 run_weasel.py -p "Hello!" [--options]
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from env_config import get_default_seed
from eval.run_evolution import evolve_phrase, load_evolution_config
from phrase.models import WeaselConfig, format_validation_error
from phrase.schema import ConfigurationError, unreachable_chars

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NOT_CONVERGED = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Weasel genetic algorithm on a phrase and approved character set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Mutation rate of 10% for each character
  python3 run_weasel.py -p "Hello!" -m 10

  # Reproducible run with a generation cap
  python3 run_weasel.py -p "METHINKS IT IS LIKE A WEASEL" --seed 42 --max-generations 500

  # Values from a YAML config (CLI flags win)
  python3 run_weasel.py --config my_config.yaml
        """,
    )
    parser.add_argument("-p", "--phrase", type=str, default=None, help="The phrase to run the algorithm on")
    parser.add_argument("-c", "--char-set", type=str, default=None, help="The approved character set")
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=None,
        help="The number of variations to produce per generation, >= 1 (default: 100)",
    )
    parser.add_argument(
        "-m",
        "--mutation-rate",
        type=int,
        default=None,
        help="The mutation rate for each character, from 1-100 (default: 5)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument(
        "--max-generations",
        type=int,
        default=None,
        help="Stop after this many generations even if not converged (default: unbounded)",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--plot", type=str, default=None, help="Save a convergence plot (PNG) here")
    parser.add_argument("--quiet", action="store_true", help="Only print the final result")
    return parser


def merge_config(file_cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Overlay CLI flags on file configuration; fill the seed from .env when unset."""
    config = dict(file_cfg)
    overrides = {
        "phrase": args.phrase,
        "char_set": args.char_set,
        "iterations": args.iterations,
        "mutation_rate": args.mutation_rate,
        "seed": args.seed,
        "max_generations": args.max_generations,
    }
    for k, v in overrides.items():
        if v is not None:
            config[k] = v
    if config.get("seed") is None:
        config["seed"] = get_default_seed()
    return config


def _report_errors(errors: List[str]) -> int:
    for message in errors:
        print(message, file=sys.stderr)
    return EXIT_CONFIG_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        file_cfg = load_evolution_config(args.config)
        config = WeaselConfig.model_validate(merge_config(file_cfg, args))
    except ConfigurationError as e:
        return _report_errors(e.errors)
    except ValidationError as e:
        return _report_errors(format_validation_error(e))

    missing = unreachable_chars(config.phrase, config.char_set)
    if missing:
        print(
            f"Warning: phrase contains characters outside the char set "
            f"({''.join(missing)!r}); it can never be reached",
            file=sys.stderr,
        )

    try:
        result = evolve_phrase(
            verbose=not args.quiet, record_history=bool(args.plot), **config.model_dump()
        )
    except ConfigurationError as e:
        return _report_errors(e.errors)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.quiet:
        print(result["best"])

    if args.plot:
        from eval.plots import plot_convergence

        out = plot_convergence(result["history"], args.plot, length=result["length"])
        print(f"Saved convergence plot to {out}", file=sys.stderr)

    if not result["converged"]:
        print(
            f"Stopped after {result['generations']} generations "
            f"({result['score']}/{result['length']} characters matched)",
            file=sys.stderr,
        )
        return EXIT_NOT_CONVERGED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
