"""Abstract notification channel.

The use cases call ``publish`` synchronously once a mutation has been
saved.  How (or whether) the event leaves the process is up to the
infrastructure implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from provenance.domain.model.events import DomainEvent


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Broadcast *event* to subscribers. Must not raise."""
