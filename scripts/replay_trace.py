"""Replay a trace file in the terminal at a fixed tick rate.

Usage:
  python scripts/replay_trace.py --trace flight.json --rate 30 --hz 10
  python scripts/replay_trace.py --sample --rate 10

Ctrl+C stops playback.
"""

from __future__ import annotations

import argparse
import logging
import sys

from flight_visualizer.playback.controller import PlaybackController
from flight_visualizer.playback.readout import format_readout
from flight_visualizer.playback.ticker import PlaybackTicker
from flight_visualizer.trajectory.builder import build_trajectory
from flight_visualizer.trajectory.loader import SAMPLE_DOCUMENT, load_trace_file
from flight_visualizer.trajectory.models import TraceFormatError


def main() -> None:
    ap = argparse.ArgumentParser(description="Replay a flight trace in the terminal")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--trace", help="Trace JSON file")
    src.add_argument("--sample", action="store_true", help="Use the bundled sample flight")
    ap.add_argument("--rate", type=float, default=1.0, help="Flight seconds per wall second")
    ap.add_argument("--hz", type=float, default=10.0, help="Ticks per second")
    ap.add_argument("--start", type=float, default=None, help="Start at this flight timestamp")
    ap.add_argument(
        "--shortest-arc",
        action="store_true",
        help="Interpolate bearing along the shorter arc",
    )
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.sample:
        document = SAMPLE_DOCUMENT
    else:
        try:
            document = load_trace_file(args.trace)
        except (OSError, TraceFormatError) as exc:
            print(f"  [!] Cannot load {args.trace}: {exc}", file=sys.stderr)
            sys.exit(1)

    controller = PlaybackController(
        build_trajectory(document), rate=args.rate, shortest_arc=args.shortest_arc
    )
    if not controller.can_play:
        print("  [!] Need at least two trace rows to play back.", file=sys.stderr)
        sys.exit(1)
    if args.start is not None:
        controller.seek(args.start)

    ticker = PlaybackTicker(controller, lambda p: print(format_readout(p)), target_hz=args.hz)
    print(f"Replaying {document.icao} at {args.rate}x, {args.hz} Hz  (Ctrl+C to stop)")
    ticker.start()
    try:
        ticker.join()
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        ticker.stop()


if __name__ == "__main__":
    main()
