#!/usr/bin/env python3
"""
Preprocess country boundaries into a code-keyed lookup.

Reads a GeoJSON FeatureCollection (default: map.geo.json), normalizes it
with normalize.normalize() and writes the lookup as compact JSON to stdout
or to a file. Skipped features and other diagnostics go to stderr.

Usage:
    python -m country_geo.preprocess --input map.geo.json > countries.json
    python -m country_geo.preprocess -i map.geo.json -o countries.json --stats
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_INPUT
from .normalize import normalize
from .validate import log_summary, summarize

logger = logging.getLogger(__name__)


def load_document(input_path: Path) -> Dict:
    """Load a GeoJSON FeatureCollection."""
    logger.info(f"Loading country boundaries from {input_path}")
    with open(input_path, encoding='utf-8') as f:
        return json.load(f)


def write_mapping(
    countries: Dict[Any, Dict],
    output_path: Optional[Path] = None,
    indent: Optional[int] = None
) -> None:
    """
    Write the country lookup as JSON.

    Args:
        countries: Output of normalize()
        output_path: File to write, or None for stdout
        indent: JSON indentation (default: compact)
    """
    text = json.dumps(countries, indent=indent)

    if output_path is None:
        sys.stdout.write(text + '\n')
        sys.stdout.flush()
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing {len(countries)} countries to {output_path}")
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)


def preprocess(
    input_path: Path,
    output_path: Optional[Path] = None,
    strict: bool = False,
    stats: bool = False,
    progress: bool = False,
    indent: Optional[int] = None
) -> bool:
    """
    Load, normalize and write country boundaries.

    Args:
        input_path: GeoJSON FeatureCollection with country features
        output_path: Where to write the lookup (None for stdout)
        strict: Reject geometry types other than Polygon/MultiPolygon
        stats: Log a geometry summary
        progress: Show a progress bar
        indent: JSON indentation (default: compact)

    Returns:
        True if successful
    """
    try:
        document = load_document(input_path)
        countries = normalize(document, strict=strict, progress=progress)
        logger.info(f"Normalized {len(countries)} countries")

        if stats:
            log_summary(summarize(countries))

        write_mapping(countries, output_path, indent=indent)
    except Exception as e:
        logger.error(f"Error preprocessing {input_path}: {e}", exc_info=True)
        return False

    return True


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Convert country boundary GeoJSON into a code-keyed lookup',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--input', '-i',
        type=Path,
        default=Path(DEFAULT_INPUT),
        help=f'Path to country boundaries GeoJSON (default: {DEFAULT_INPUT})'
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=None,
        help='Path to write the lookup JSON (default: stdout)'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help='Indent output JSON by this many spaces (default: compact)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on geometry types other than Polygon and MultiPolygon'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Log polygon/ring counts and invalid geometries'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    success = preprocess(
        input_path=args.input,
        output_path=args.output,
        strict=args.strict,
        stats=args.stats,
        progress=args.progress,
        indent=args.indent
    )

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
