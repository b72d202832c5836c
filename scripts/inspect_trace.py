"""Print a summary of a trace file and its interpolated states.

Usage:
  python scripts/inspect_trace.py --trace flight.json --steps 10
  python scripts/inspect_trace.py --sample --shortest-arc
"""

from __future__ import annotations

import argparse
import logging
import sys

from flight_visualizer.playback.readout import format_readout
from flight_visualizer.trajectory.builder import build_trajectory
from flight_visualizer.trajectory.interpolator import TrajectoryInterpolator
from flight_visualizer.trajectory.loader import SAMPLE_DOCUMENT, load_trace_file
from flight_visualizer.trajectory.models import TraceFormatError


def main() -> None:
    ap = argparse.ArgumentParser(description="Inspect a flight trace file")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--trace", help="Trace JSON file")
    src.add_argument("--sample", action="store_true", help="Use the bundled sample flight")
    ap.add_argument("--steps", type=int, default=10, help="Number of interpolated states to print")
    ap.add_argument(
        "--shortest-arc",
        action="store_true",
        help="Interpolate bearing along the shorter arc",
    )
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.sample:
        document = SAMPLE_DOCUMENT
    else:
        try:
            document = load_trace_file(args.trace)
        except (OSError, TraceFormatError) as exc:
            print(f"  [!] Cannot load {args.trace}: {exc}", file=sys.stderr)
            sys.exit(1)

    trajectory = build_trajectory(document)
    print(f"ICAO      : {document.icao}")
    print(f"Version   : {document.version}")
    print(f"Points    : {len(trajectory.aircraft)}")
    print(f"Time range: {trajectory.min_timestamp} .. {trajectory.max_timestamp}"
          f"  ({trajectory.duration:.1f} s)")
    print()

    if trajectory.is_empty:
        print("  [!] Trace has no rows.", file=sys.stderr)
        sys.exit(1)

    print("Samples:")
    for i, point in enumerate(trajectory.aircraft, start=1):
        print(f"  {i:>4}  {format_readout(point)}")

    if args.steps < 2 or trajectory.duration <= 0:
        return

    print()
    print(f"Interpolated ({args.steps} steps):")
    interp = TrajectoryInterpolator(trajectory.aircraft, shortest_arc=args.shortest_arc)
    step = trajectory.duration / (args.steps - 1)
    for i in range(args.steps):
        print(f"        {format_readout(interp.at(trajectory.min_timestamp + i * step))}")


if __name__ == "__main__":
    main()
