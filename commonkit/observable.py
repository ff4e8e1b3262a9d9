"""Observer pattern: observables that notify registered observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Observer(ABC):
    """Receives updates from an Observable."""

    @abstractmethod
    def obs_update(self, observable: Observable, arg: Any) -> None:
        """Called by the observed object whenever it notifies."""


class Observable:
    """Keeps a set of observers and a changed flag."""

    def __init__(self) -> None:
        self._changed = False
        self._observers: dict[Observer, None] = {}

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; adding it twice has no extra effect."""
        self._observers[observer] = None

    def delete_observer(self, observer: Observer) -> None:
        """Unregister an observer if it is registered."""
        self._observers.pop(observer, None)

    def delete_observers(self) -> None:
        """Unregister every observer."""
        self._observers.clear()

    def count_observers(self) -> int:
        """Return how many observers are registered."""
        return len(self._observers)

    def has_changed(self) -> bool:
        """Tell whether the changed flag is set."""
        return self._changed

    def set_changed(self) -> None:
        """Mark this object as changed."""
        self._changed = True

    def clear_changed(self) -> None:
        """Clear the changed flag."""
        self._changed = False

    def notify_observers_if_changed(self, arg: Any = None) -> None:
        """Notify observers only if changed, then clear the flag."""
        if not self.has_changed():
            return
        self.notify_observers(arg)
        self.clear_changed()

    def notify_observers(self, arg: Any = None) -> None:
        """Notify every observer regardless of the changed flag."""
        for observer in list(self._observers):
            observer.obs_update(self, arg)