"""Minimal event emitter that can be granted to any class."""

from __future__ import annotations

import inspect
import logging
import weakref
from typing import Any, Callable

Listener = Callable[..., Any]

# Instance attribute holding the lazily created registry of a host object
REGISTRY_ATTR = "_event_registry"

GRANTED_METHODS = ("add_event_listener", "remove_event_listener", "emit")


def _same_listener(a: Listener, b: Listener) -> bool:
    """Identity comparison that treats two bound methods of one object and function as the same."""
    if a is b:
        return True
    if inspect.ismethod(a) and inspect.ismethod(b):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    return False


class EventRegistry:
    """Ordered mapping of event names to listeners.

    Listeners are compared by identity and registered at most once per event.
    Listeners are called synchronously with the receiver as first argument;
    exceptions bubble up normally.
    """

    def __init__(self, owner: object | None = None) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._owner_ref = None
        self._owner_id = None
        if owner is not None:
            try:
                self._owner_ref = weakref.ref(owner)
            except TypeError:
                # no __weakref__ slot
                self._owner_id = id(owner)

    def owned_by(self, host: object) -> bool:
        """Whether this registry was created for ``host``."""
        if self._owner_ref is not None:
            return self._owner_ref() is host
        return self._owner_id is not None and self._owner_id == id(host)

    def register(self, event_name: str, listener: Listener) -> None:
        """Register a listener for an event, ignoring an already registered one."""
        listeners = self._listeners.setdefault(event_name, [])
        if any(_same_listener(existing, listener) for existing in listeners):
            logging.debug(f"Listener {listener!r} already registered for '{event_name}'")
            return
        listeners.append(listener)
        logging.debug(f"Registered listener {listener!r} for '{event_name}'")

    def unregister(self, event_name: str, listener: Listener) -> None:
        """Remove the first occurrence of a listener. Unknown names or listeners are ignored."""
        listeners = self._listeners.get(event_name)
        if not listeners:
            return

        for index, existing in enumerate(listeners):
            if _same_listener(existing, listener):
                del listeners[index]
                logging.debug(f"Unregistered listener {listener!r} from '{event_name}'")
                break
        else:
            logging.debug(f"Listener {listener!r} not registered for '{event_name}'")

        if not listeners:
            del self._listeners[event_name]

    def emit(self, receiver: Any, event_name: str, *args, **kwargs) -> None:
        """Call every listener of an event as ``listener(receiver, *args, **kwargs)``.

        The listener list is copied before dispatch, so listeners added or
        removed by a running listener only take effect on the next emit.
        """
        listeners = self._listeners.get(event_name)
        if not listeners:
            logging.debug(f"Emitting '{event_name}' with no listeners")
            return

        snapshot = list(listeners)
        logging.debug(f"Emitting '{event_name}' to {len(snapshot)} listener(s)")
        for listener in snapshot:
            listener(receiver, *args, **kwargs)

    def listeners(self, event_name: str) -> list[Listener]:
        """Return a copy of the listeners registered for an event."""
        return list(self._listeners.get(event_name, []))

    def event_names(self) -> list[str]:
        """Return the names of events that have at least one listener."""
        return list(self._listeners)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        counts = {name: len(listeners) for name, listeners in self._listeners.items()}
        return f"{type(self).__name__}({counts})"


def get_registry(host: object) -> EventRegistry:
    """Return the registry of a host object, creating it on first use.

    A registry carried over from another object (e.g. by ``copy.copy``) is
    replaced with a fresh one so instances never share listeners.
    """
    registry = getattr(host, REGISTRY_ATTR, None)
    if registry is None or not registry.owned_by(host):
        registry = EventRegistry(owner=host)
        setattr(host, REGISTRY_ATTR, registry)
    return registry


class EventEmitter:
    """Event methods copied onto host classes by :func:`event_emitter`.

    Not meant to be subclassed: granting copies the methods so the host keeps
    its own class hierarchy.
    """

    def add_event_listener(self, event_name: str, listener: Listener) -> None:
        """Register a listener for an event on this object."""
        get_registry(self).register(event_name, listener)

    def remove_event_listener(self, event_name: str, listener: Listener) -> None:
        """Remove a listener for an event on this object."""
        get_registry(self).unregister(event_name, listener)

    def emit(self, event_name: str, *args, **kwargs) -> None:
        """Call all listeners registered for this event, passing this object first."""
        get_registry(self).emit(self, event_name, *args, **kwargs)


def _can_hold_registry(cls: type) -> bool:
    """Whether instances of ``cls`` accept the registry attribute."""
    if cls.__dictoffset__ != 0:
        return True
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if REGISTRY_ATTR in slots:
            return True
    return False


def event_emitter(cls: type) -> type:
    """Grant event capability to a class.

    Copies ``add_event_listener``, ``remove_event_listener`` and ``emit`` onto
    ``cls`` without making it inherit from :class:`EventEmitter`. Each instance
    gets its own registry on first use. Returns ``cls`` so it can also be used
    as a class decorator.

    Raises:
        TypeError: If instances of ``cls`` cannot store the registry attribute.
    """
    if not _can_hold_registry(cls):
        raise TypeError(
            f"Cannot grant events to {cls.__name__}: its __slots__ need '__dict__' or '{REGISTRY_ATTR}'"
        )

    for name in GRANTED_METHODS:
        method = EventEmitter.__dict__[name]
        existing = cls.__dict__.get(name)
        if existing is not None and existing is not method:
            logging.warning(f"Overwriting {cls.__name__}.{name} with event emitter method")
        setattr(cls, name, method)

    logging.debug(f"Granted event emitter methods to {cls.__name__}")
    return cls
