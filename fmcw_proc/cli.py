"""Command line runner.

Processes one ADC capture according to a YAML parameter file and
writes the range–Doppler map, range profiles and derived parameters
to an output directory:

    fmcw-proc --config radar.yaml --input adc_data.bin --output out/
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .errors import FmcwProcError
from .export import save_result
from .pipeline import process_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute the range-Doppler map and range profile of an FMCW ADC capture")
    parser.add_argument("--config", type=str, required=True, help="Path to YAML radar parameter file")
    parser.add_argument("--input", type=str, required=True, help="Path to the raw int16 ADC capture")
    parser.add_argument("--output", type=str, default="output", help="Directory for the result files")
    parser.add_argument("--workers", type=int, default=None, help="Threads used by the FFT stages")
    parser.add_argument("--verbose", action="store_true", help="Log stage timings")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(args.config)
        result = process_file(args.input, config, workers=args.workers)
    except (FmcwProcError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    paths = save_result(result, args.output)
    print("Processing completed. Summary:")
    for k, v in result.params.summary().items():
        print(f"  {k}: {v}")
    for kind, path in paths.items():
        print(f"  {kind} written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
