#!/usr/bin/env python3
# Path: keyseg/main.py
"""
keyseg - Main Entry Point

Segments free-text inputs against a YAML grammar and prints the ranked
terms with their segmentations as JSON.

Data Flow:
    INPUT:   Grammar files (bundled or KEYSEG_GRAMMAR_DIR) and CLI inputs
    PROCESS: Keyword segmentation and term ranking
    OUTPUT:  JSON on stdout, logs on stderr and in KEYSEG_LOG_DIR

Usage:
    python -m keyseg "Harry James Potter"
    python -m keyseg --term FULLADDRESS "4 Privet Drive Little Whinging"
    python -m keyseg --grammar ./grammars --log-level DEBUG "1980-07-30"

Exit codes:
    0  every input matched at least one term
    1  at least one input matched nothing
    2  configuration error (grammar, environment, arguments)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config_loader import ConfigLoader
from .constants import (
    EXIT_ALL_MATCHED,
    EXIT_CONFIGURATION_ERROR,
    EXIT_UNMATCHED_INPUT,
    TiebreakerType,
)
from .core.logger import get_input_logger, get_output_logger, setup_ipo_logging
from .matcher.engine import GrammarLoader, TermAggregator
from .matcher.errors import GrammarError, UnknownTermError
from .matcher.models.term import term_name


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog='keyseg',
        description='keyseg - Keyword segmentation of free-text inputs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  keyseg "Harry James Potter"                 Rank every term
  keyseg --term FULLNAME "Undesirable No 1"   Segment for one term
  keyseg --grammar my_grammar.yaml "..."      Use another grammar
        """
    )

    parser.add_argument(
        'inputs',
        nargs='+',
        metavar='INPUT',
        help='Text to segment'
    )

    parser.add_argument(
        '--grammar', '-g',
        type=Path,
        help='Grammar file or directory (default: KEYSEG_GRAMMAR_DIR or bundled)'
    )

    parser.add_argument(
        '--term', '-t',
        type=str,
        help='Only segment for the term with this name'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Logging level (default: KEYSEG_LOG_LEVEL or INFO)'
    )

    parser.add_argument(
        '--workers', '-w',
        type=int,
        help='Threads used to evaluate terms (default: KEYSEG_MAX_WORKERS)'
    )

    parser.add_argument(
        '--tiebreaker',
        choices=[t.value for t in TiebreakerType],
        help='Ordering of equally weighted terms (default: KEYSEG_TIEBREAKER)'
    )

    parser.add_argument(
        '--ranked', '-r',
        action='store_true',
        help='Order segmentations by keyword weight (requires --term)'
    )

    return parser


def load_aggregator(config: ConfigLoader, args: argparse.Namespace) -> TermAggregator:
    """
    Load the grammar and build the aggregator.

    Raises:
        GrammarError: If the grammar cannot be loaded or built
    """
    grammar_path = args.grammar or config.get('grammar_dir')
    workers = args.workers if args.workers is not None else config.get('max_workers')
    tiebreaker = args.tiebreaker or config.get('tiebreaker')

    loader = GrammarLoader(
        grammar_path,
        default_separator=config.get('default_separator'),
    )
    return loader.load_aggregator(max_workers=workers, tiebreaker=tiebreaker)


def find_term(aggregator: TermAggregator, name: str):
    """
    Return the registered term with the given name.

    Raises:
        UnknownTermError: If no term has that name
    """
    for term in aggregator.terms:
        if term_name(term) == name:
            return term
    raise UnknownTermError(name)


def analyze_inputs(
    aggregator: TermAggregator,
    inputs: Sequence[str],
    term_filter: Optional[str] = None,
    ranked: bool = False
) -> tuple[list[dict], bool]:
    """
    Analyze every input.

    Returns:
        Tuple of (JSON-ready results, whether every input matched)
    """
    logger = get_input_logger('cli')
    results = []
    all_matched = True

    if term_filter is not None:
        term = find_term(aggregator, term_filter)
        matcher = aggregator.matcher_for(term)
        for text in inputs:
            segmentations = matcher.rank(text) if ranked else matcher.analyze(text)
            if not segmentations:
                all_matched = False
                logger.info(f"No segmentation of {text!r} for term {term_filter}")
            results.append({
                'input': text,
                'term': term_filter,
                'segmentations': [s.to_dict() for s in segmentations],
            })
        return results, all_matched

    for text in inputs:
        result = aggregator.analyze(text)
        if not result:
            all_matched = False
            logger.info(f"No term matched {text!r}")
        results.append(result.to_dict())

    return results, all_matched


def render(results: list[dict], indent: Optional[int]) -> str:
    """Render results as JSON; a single input is rendered unwrapped."""
    logger = get_output_logger('json_renderer')
    payload = results[0] if len(results) == 1 else results
    logger.debug(f"Rendering {len(results)} result(s)")
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for keyseg.

    Args:
        argv: Command line arguments; sys.argv[1:] when None

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.ranked and args.term is None:
        parser.error('--ranked requires --term')

    try:
        config = ConfigLoader()
        setup_ipo_logging(
            log_dir=config.get('log_dir'),
            log_level=args.log_level or config.get('log_level', 'INFO'),
            console_output=config.get('log_console', True)
        )
        logger = get_input_logger('main')
        logger.info(f"Analyzing {len(args.inputs)} input(s)")

        aggregator = load_aggregator(config, args)
        results, all_matched = analyze_inputs(
            aggregator, args.inputs, args.term, args.ranked
        )

    except GrammarError as e:
        print(f"Grammar error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    indent = config.get('json_indent')
    print(render(results, indent if indent and indent > 0 else None))

    return EXIT_ALL_MATCHED if all_matched else EXIT_UNMATCHED_INPUT


if __name__ == '__main__':
    sys.exit(main())
