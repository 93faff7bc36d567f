"""
Observer
========

An object publishes changes to its state; subscribers attached to it are
notified immediately.

Usage:
    shorts = Product()
    shorts.attach(User())
    shorts.in_stock = True   # every attached user is notified
"""

import uuid
from abc import ABC, abstractmethod
from typing import List

from behavioral.core.logger import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    @abstractmethod
    def get_notification(self, in_stock: bool) -> None:
        ...


class Observable(ABC):
    """Keeps a list of observers; subclasses decide what notify() sends."""

    def __init__(self):
        self.observers: List[Observer] = []

    def attach(self, observer: Observer) -> None:
        self.observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove ``observer``. Observers that were never attached are ignored."""
        for index, attached in enumerate(self.observers):
            if attached is observer:
                del self.observers[index]
                return

    @abstractmethod
    def notify(self) -> None:
        ...


class Product(Observable):
    """A product whose stock status is pushed to its observers on change."""

    def __init__(self):
        super().__init__()
        self.id = str(uuid.uuid4())
        self._in_stock = False

    @property
    def in_stock(self) -> bool:
        return self._in_stock

    @in_stock.setter
    def in_stock(self, value: bool) -> None:
        self._in_stock = bool(value)
        self.notify()

    def notify(self) -> None:
        for observer in list(self.observers):
            observer.get_notification(self._in_stock)


class User(Observer):
    """Observer that remembers every stock notification it receives."""

    def __init__(self, name: str = "user"):
        self.name = name
        self.notifications: List[bool] = []

    def get_notification(self, in_stock: bool) -> None:
        self.notifications.append(in_stock)
        logger.info(f"Is product available? {in_stock}")
