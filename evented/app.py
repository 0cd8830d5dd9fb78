"""Small demo wiring a host class, a listener and the logger together."""

from __future__ import annotations

import logging
import sys

from evented.lib.args import parse_evented_args
from evented.lib.events import event_emitter
from evented.lib.logger import configure_logger


@event_emitter
class Counter:
    """Counts up and emits ``tick`` with the new value."""

    def __init__(self) -> None:
        self.value = 0

    def increment(self) -> None:
        self.value += 1
        self.emit("tick", self.value)


def print_tick(counter: Counter, value: int) -> None:
    print(f"tick {value} (counter at {counter.value})")


def main(argv: list[str] | None = None) -> int:
    args = parse_evented_args(argv)

    log_file = configure_logger(
        log_level=args.log_level, log_dir=args.log_dir, max_log_files=args.max_log_files
    )
    logging.info(f"Logging to {log_file}")

    counter = Counter()
    counter.add_event_listener("tick", print_tick)
    for _ in range(args.ticks):
        counter.increment()
    counter.remove_event_listener("tick", print_tick)

    logging.info(f"Emitted {counter.value} tick event(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
