"""Console entrypoint for the ``pulsesim`` command."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from pulsesim import puzzle
from pulsesim.core import EngineConfig, PulseEngine, QuiescenceError, parse_network


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _run_part1_with_plot(text: str, presses: int, config: EngineConfig, plot: Path) -> str:
    # matplotlib is only imported when a plot is requested
    from pulsesim.viz import plot_pulse_counts, save_figure

    engine = PulseEngine(parse_network(text), config)
    engine.run(presses)
    fig, _ = plot_pulse_counts(engine.get_count_history())
    save_figure(fig, plot)
    print(f"Saved: {plot}")
    return str(engine.value())


def main(argv: list[str] | None = None) -> int:
    """Parse ``pulsesim`` CLI arguments, solve the requested part and print it."""

    parser = argparse.ArgumentParser(prog="pulsesim")
    parser.add_argument("input", type=Path, help="Module definition file")
    parser.add_argument("-p", "--part", type=int, choices=[1, 2], required=True)
    parser.add_argument(
        "--presses",
        type=_positive_int,
        default=puzzle.DEFAULT_PRESSES,
        help="Button presses for part 1",
    )
    parser.add_argument(
        "--target", default=puzzle.DEFAULT_TARGET, help="Sink watched by part 2"
    )
    parser.add_argument(
        "--max-messages",
        type=_positive_int,
        help="Abort a press that handles more than this many messages",
    )
    parser.add_argument("--plot", type=Path, help="Save a pulse-count plot (part 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.input.read_text()
    except OSError as exc:
        print(f"Cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    config = EngineConfig(max_messages_per_press=args.max_messages)
    start = time.perf_counter()
    try:
        if args.part == 1 and args.plot is not None:
            result = _run_part1_with_plot(text, args.presses, config, args.plot)
        elif args.part == 1:
            result = puzzle.part1(text, presses=args.presses, config=config)
        else:
            result = puzzle.part2(text, target=args.target, config=config)
    except (ValueError, QuiescenceError) as exc:
        print(f"Part {args.part} failed: {exc}", file=sys.stderr)
        return 1
    elapsed_ms = (time.perf_counter() - start) * 1000

    print(f"Answer for part {args.part} is {result} (took {elapsed_ms:.2f} ms)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
