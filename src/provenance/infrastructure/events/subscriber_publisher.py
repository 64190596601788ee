"""In-process EventPublisher that fans events out to subscriber callables.

Dispatch behavior:
1. Log the event at DEBUG
2. Call each subscriber in registration order
3. Log and skip any subscriber that raises

A failing subscriber never breaks delivery to the others and never
undoes the state change that produced the event.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

from provenance.domain.model.events import DomainEvent
from provenance.domain.service.event_publisher import EventPublisher

logger = logging.getLogger("provenance.events")

Subscriber = Callable[[DomainEvent], None]


class SubscriberPublisher(EventPublisher):

    def __init__(self, subscribers: list[Subscriber] | None = None) -> None:
        self._subscribers: list[Subscriber] = list(subscribers or [])
        self._lock = Lock()

    def subscribe(self, subscriber: Subscriber) -> None:
        if not callable(subscriber):
            raise TypeError(f"Subscriber must be callable, got {type(subscriber)}")
        with self._lock:
            self._subscribers.append(subscriber)

    def publish(self, event: DomainEvent) -> None:
        event_name = type(event).__name__
        logger.debug(f"Publishing {event_name}: {event}")

        with self._lock:
            subscribers = list(self._subscribers)

        for subscriber in subscribers:
            subscriber_name = getattr(subscriber, "__qualname__", repr(subscriber))
            try:
                subscriber(event)
            except Exception as exc:
                logger.error(
                    f"Subscriber {subscriber_name} failed on {event_name}: {exc}",
                    exc_info=True,
                )
                continue
            logger.debug(f"Dispatched {event_name} -> {subscriber_name}")
