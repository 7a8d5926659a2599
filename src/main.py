"""
Main entry point for generating word ladders.

Usage:
    python -m src.main cat dog --lexicon english.txt
    python -m src.main --config ladders.yaml --output results/run1.json --verbose
"""

import argparse
import json
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import LadderConfig, LadderQuery, RunResult, build_lexicon, load_config
from .ladder import format_ladders, solve, verify_ladders


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find all shortest word ladders between two words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example ladders.yaml:
  lexicon: english.txt
  verify: true
  queries:
    - from: work
      to: play
    - from: awake
      to: sleep
        """
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Word to start from (not needed with --config)"
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Word to reach"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--lexicon", "-l",
        help="Path to a word list, one word per line (overrides the config)"
    )
    parser.add_argument(
        "--word", "-w",
        action="append",
        default=[],
        help="Extra lexicon word (repeatable)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check every generated ladder and report problems"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print search statistics to stdout"
    )
    return parser


def save_result(result: RunResult, path: str | Path) -> None:
    """Save the run result to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.model_dump(), f, indent=2, default=str)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = LadderConfig()

    if args.lexicon:
        config.lexicon = args.lexicon
    config.words.extend(args.word)
    config.verify = config.verify or args.verify

    if args.source or args.target:
        if not (args.source and args.target):
            print("Error: both source and target words are required", file=sys.stderr)
            return 1
        config.queries.append(LadderQuery(source=args.source, target=args.target))

    if not config.queries:
        print("Error: no words given (pass SOURCE TARGET or --config)", file=sys.stderr)
        return 1

    started_at = datetime.now()
    lexicon = build_lexicon(config)

    if args.verbose:
        print(f"Lexicon: {config.lexicon or '<inline>'} ({len(lexicon)} words)")
        print(f"Queries: {len(config.queries)}")
        print()

    run = RunResult(config=config, lexicon_size=len(lexicon), started_at=started_at.isoformat())

    for query in config.queries:
        start = time.perf_counter()
        result = solve(query.source, query.target, lexicon)
        elapsed_ms = (time.perf_counter() - start) * 1000
        run.results.append(result)

        if args.verbose:
            depth = result.depth if result.depth is not None else "-"
            print(
                f"{query.source} -> {query.target}: {len(result.ladders)} ladders, "
                f"depth {depth}, {result.words_explored} words explored "
                f"in {result.layers} layers ({elapsed_ms:.1f}ms)"
            )

        if result.found:
            print(format_ladders(result.ladders))
        else:
            print(f"No ladder found from '{query.source}' to '{query.target}'")

        if config.verify:
            validation = verify_ladders(result.ladders, query.source, query.target, lexicon)
            run.validations.append(validation)
            if validation.valid:
                print("✓ Ladders verified")
            else:
                print(f"✗ {len(validation.errors)} problems:")
                for err in validation.errors:
                    print(f"  - {err.message}")

        print("-" * 72)

    ended_at = datetime.now()
    run.ended_at = ended_at.isoformat()
    run.duration_seconds = (ended_at - started_at).total_seconds()

    if args.output:
        save_result(run, args.output)
        if args.verbose:
            print(f"Results saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
