"""Animations drawn in place on one terminal line."""

from __future__ import annotations

import argparse
import itertools
import sys
import time
from collections.abc import Iterator, Sequence
from typing import TextIO

SPINNER = ("-", "\\", "|", "/")
BLINK = ("*" * 11, "." * 11)

_STYLES = {
    "spinner": (SPINNER, 0.2),
    "blink": (BLINK, 1.0),
}


def frames(symbols: Sequence[str]) -> Iterator[str]:
    """Cycle through ``symbols`` forever."""
    if not symbols:
        raise ValueError("an animation needs at least one frame")
    return itertools.cycle(symbols)


def spin(
    symbols: Sequence[str] = SPINNER,
    interval: float = 0.2,
    stream: TextIO | None = None,
    cycles: int | None = None,
) -> None:
    """Draw each frame over the last one, pausing ``interval`` seconds between them.

    Runs forever unless ``cycles`` limits the number of passes through the frames.
    """
    if interval < 0:
        raise ValueError("interval must not be negative")
    if cycles is not None and cycles < 0:
        raise ValueError("cycles must not be negative")
    out = stream if stream is not None else sys.stdout
    sequence = frames(symbols)
    if cycles is not None:
        sequence = itertools.islice(sequence, cycles * len(symbols))
    for frame in sequence:
        out.write(frame + "\r")
        out.flush()
        time.sleep(interval)


def main(argv: list[str] | None = None) -> int:
    """Run an animation until interrupted."""
    parser = argparse.ArgumentParser(prog="spinner", description="Animate a terminal line.")
    parser.add_argument("--style", choices=sorted(_STYLES), default="spinner")
    parser.add_argument("--interval", type=float, default=None)
    parser.add_argument("--cycles", type=int, default=None)
    args = parser.parse_args(argv)

    symbols, interval = _STYLES[args.style]
    if args.interval is not None:
        interval = args.interval
    try:
        spin(symbols, interval, sys.stdout, args.cycles)
    except ValueError as exc:
        parser.error(str(exc))
    except KeyboardInterrupt:
        pass
    return 0