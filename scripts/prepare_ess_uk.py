#!/usr/bin/env python3
"""
Prepare the ESS UK analysis file.

Loads the ESS round 7 interview, sample design and contact form extracts,
keeps one country, merges them into one row per sampled unit, recodes
cigarette and alcohol consumption and prints a summary.

Usage:
    python scripts/prepare_ess_uk.py [options]

Options:
    --config PATH      Path to YAML config file (default: configs/ess_uk.yaml)
    --country NAME     Override the target country (label or code)
    --output FILE      Override the variable listing file name
    --n_preview N      Rows shown in the head-of-table preview
    --quiet            Only print errors

Output:
    - Variable listing (name, label) as CSV in the output directory

Examples:
    python scripts/prepare_ess_uk.py
    python scripts/prepare_ess_uk.py --country GB --n_preview 10
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root / 'src'))

from ess_prep import PipelineConfigError, PreparationPipeline, load_config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Prepare the merged ESS UK analysis file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--config', type=str, default=str(repo_root / 'configs' / 'ess_uk.yaml'),
                        help='Path to YAML config file')
    parser.add_argument('--country', type=str, default=None,
                        help='Target country (overrides config)')
    parser.add_argument('--output', type=str, default=None,
                        help='Variable listing file name (overrides config)')
    parser.add_argument('--n_preview', type=int, default=None,
                        help='Rows in the head-of-table preview (overrides config)')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    overrides = {}
    if args.country:
        overrides['country'] = args.country
    if args.output:
        overrides['listing_filename'] = args.output
    if args.n_preview is not None:
        overrides['n_preview'] = args.n_preview

    config = load_config(args.config, overrides=overrides)
    paths = config['paths']

    issues = paths.validate()
    if issues:
        for issue in issues:
            print(f"ERROR: {issue}", file=sys.stderr)
        return 1

    if not args.quiet:
        print("=" * 70)
        print("ESS DATA PREPARATION")
        print("=" * 70)
        print(paths)
        print()

    pipeline = PreparationPipeline(paths, config['pipeline'], verbose=not args.quiet)
    try:
        result = pipeline.run()
    except PipelineConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if not args.quiet:
        print()
        print("=" * 70)
        print("DONE")
        print("=" * 70)
        print(f"Merged units: {result.summary.n_rows:,}")
        if result.listing_path:
            print(f"Variable listing: {result.listing_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
