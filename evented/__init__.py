from evented.lib.events import EventEmitter, EventRegistry, event_emitter
from evented.lib.logger import configure_logger
from evented.version import PACKAGE, __version__

VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    EventEmitter.__name__,
    EventRegistry.__name__,
    event_emitter.__name__,
    configure_logger.__name__,
]
