"""Allow running Hourglass as a module: python -m hourglass.

Prints the timer on every update at the chosen precision, e.g.::

    python -m hourglass --countdown --start 0:05:00
    python -m hourglass --precision minutes --target 1:30:00
"""

from __future__ import annotations

import argparse
import signal
import sys

from PyQt6.QtCore import QCoreApplication

from .settings import configure_logging, load_settings
from .timer import Precision, TimerEngine, TimerEvent


def parse_clock(text: str) -> list[int]:
    """``"H:M:S"``, ``"M:S"`` or ``"S"`` → ``[seconds, minutes, hours]``."""
    parts = text.split(":")
    if len(parts) > 3:
        raise argparse.ArgumentTypeError(f"not a clock value: {text!r}")
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a clock value: {text!r}") from None
    numbers.reverse()
    return numbers + [0] * (3 - len(numbers))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hourglass", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--precision",
        choices=[p.value for p in Precision],
        help="unit at which updates are printed and the target is checked",
    )
    parser.add_argument(
        "--countdown",
        action="store_true",
        default=None,
        help="count down instead of up",
    )
    parser.add_argument("--start", type=parse_clock, metavar="H:M:S", help="start value")
    parser.add_argument("--target", type=parse_clock, metavar="H:M:S", help="stop here")
    parser.add_argument("--log-level", help="logging level (default from settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    options = settings.start_options()
    if args.precision is not None:
        options["precision"] = args.precision
    if args.countdown is not None:
        options["countdown"] = args.countdown
    if args.start is not None:
        options["start_values"] = args.start
    if args.target is not None:
        options["target"] = args.target

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    engine = TimerEngine()

    def on_target(data) -> None:
        print(f"Target achieved at {data.time_values}")
        app.quit()

    engine.add_event_listener(TimerEvent.TARGET_ACHIEVED, on_target)

    try:
        engine.start(
            callback=lambda timer: print(timer.get_time_values(), flush=True),
            **options,
        )
    except (ValueError, TypeError) as exc:
        print(f"hourglass: {exc}", file=sys.stderr)
        return 2

    print(engine.get_time_values(), flush=True)
    if not engine.is_running():
        print("Already at target.")
        return 0

    # Let Ctrl-C interrupt the Qt loop.
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
