"""Pytest fixtures for evented tests."""

import logging

import pytest

from evented.lib.events import event_emitter


@event_emitter
class Host:
    """Plain host class granted event capability."""

    def __init__(self, name: str = "host") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Host({self.name!r})"


@pytest.fixture
def host():
    """A fresh instance of a granted host class."""
    return Host()


@pytest.fixture
def restore_logging():
    """Restore logger handlers and levels changed by configure_logger."""
    saved = {}
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            saved[name] = (logger.handlers[:], logger.level)
    root_handlers = logging.root.handlers[:]
    root_level = logging.root.level

    yield

    for handler in logging.root.handlers:
        if handler not in root_handlers:
            handler.close()
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        handlers, level = saved.get(name, ([], logging.NOTSET))
        logger.handlers[:] = handlers
        logger.setLevel(level)
