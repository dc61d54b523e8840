"""
Command-line interface for policy number OCR.

Usage:
    policy-ocr [INPUT] [-o OUTPUT] [--correct | --no-correct] [--workers N]
               [--config PATH] [-v]

INPUT defaults to ``io.default_input`` from the configuration. Results go to
stdout unless ``--output`` is given.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config_loader import Config, get_default_config, load_config
from .processor import PolicyProcessor

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="policy-ocr",
        description="Parse, validate and correct ASCII-art policy numbers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input OCR text file (default: io.default_input from config)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file (default: print to stdout)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Configuration YAML file (default: bundled config.yaml)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--correct",
        dest="correct",
        action="store_true",
        default=None,
        help="Repair ILL/ERR entries by single-segment search",
    )
    mode.add_argument(
        "--no-correct",
        dest="correct",
        action="store_false",
        help="Plain mode: report raw numbers with ILL/ERR tags only",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for batch processing (default: from config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> Config:
    config = get_default_config() if args.config is None else load_config(Path(args.config))

    # Command-line flags override the file
    if args.correct is not None:
        config.policy_ocr.correction.enabled = args.correct
    if args.workers is not None:
        if args.workers < 1:
            raise ValueError(f"--workers must be at least 1, got {args.workers}")
        config.policy_ocr.processing.workers = args.workers

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 1

    log_config = config.policy_ocr.logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_config.level,
        format=log_config.format,
    )

    input_path = Path(args.input or config.policy_ocr.io.default_input)
    processor = PolicyProcessor(config=config)

    try:
        if args.output is not None:
            batch = processor.write_results(input_path, Path(args.output))
        else:
            batch = processor.process_file(input_path)
            for line in batch.lines:
                print(line)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Processing failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(f"Finished {input_path}: {batch.status_counts()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
