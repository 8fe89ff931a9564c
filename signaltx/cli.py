"""Command line front end: load a text file, encode it to bits and modulate it."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, Sequence

from .model import TextModel


def format_bits(bits: Iterable[int]) -> str:
    """Render encoded bits as a string of 0 and 1 characters."""
    return "".join(str(bit) for bit in bits).strip()


def format_samples(samples: Iterable[float]) -> str:
    """Render modulated samples with two decimals, separated by spaces."""
    return " ".join(f"{value:.2f}" for value in samples)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signaltx",
        description="Encode a text file to a bit stream and modulate it onto a carrier.",
    )
    parser.add_argument("input", help="text file to load")
    parser.add_argument(
        "-e",
        "--encoding",
        default="UTF-8",
        help="text encoding used to produce bits: UTF-8 or UTF-16 (default: UTF-8)",
    )
    parser.add_argument(
        "-m",
        "--modulation",
        default=None,
        help="modulation to apply to the bits: ASK or PSK (default: none)",
    )
    parser.add_argument(
        "-s",
        "--save",
        metavar="PATH",
        default=None,
        help="write the loaded text to PATH",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    model = TextModel()

    try:
        model.load(args.input)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Cannot open file: {exc}", file=sys.stderr)
        return 1

    if args.save:
        try:
            model.save(args.save)
        except OSError as exc:
            print(f"Error: Cannot open file: {exc}", file=sys.stderr)
            return 1

    print(f"Sample rate: {model.SAMPLE_RATE:g} Hz")

    bits: List[int] = model.encode(args.encoding)
    print("Encoded:")
    print(format_bits(bits))

    if args.modulation is not None:
        samples = model.modulate(args.modulation)
        print("Modulated:")
        print(format_samples(samples))

    return 0


if __name__ == "__main__":
    sys.exit(main())