"""Observer pattern: reacting to order status changes.

The order knows only that it has observers, not what they do; mailers and
audit logs subscribe and unsubscribe independently.
"""

from __future__ import annotations

import abc
import logging

logger = logging.getLogger(__name__)


class Observer(abc.ABC):
    """Receives `update(subject)` whenever a subject it watches changes."""

    @abc.abstractmethod
    def update(self, subject: Subject) -> None:
        """Called by the subject after its state changes."""


class Subject:
    """Keeps a list of observers and notifies them in attach order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Subscribe `observer`; attaching the same observer twice is a no-op."""
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Unsubscribe `observer`; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self)


class Order(Subject):
    """An order whose status changes are broadcast to observers.

    Setting `status` to its current value notifies nobody.
    """

    def __init__(self, number: str, customer_email: str) -> None:
        super().__init__()
        self.number = number
        self.customer_email = customer_email
        self._status = "new"

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        if value == self._status:
            return
        logger.debug("Order %s: %s -> %s", self.number, self._status, value)
        self._status = value
        self.notify()


class CustomerMailer(Observer):
    def __init__(self) -> None:
        self.sent: list[str] = []

    def update(self, subject: Subject) -> None:
        if isinstance(subject, Order):
            self.sent.append(
                f"to {subject.customer_email}: order {subject.number} is {subject.status}"
            )


class AuditLog(Observer):
    """Appends one line per status change it sees."""

    def __init__(self) -> None:
        self.entries: list[str] = []

    def update(self, subject: Subject) -> None:
        if isinstance(subject, Order):
            self.entries.append(f"{subject.number}:{subject.status}")


def demo() -> list[str]:
    """Move an order through its statuses; the mailer unsubscribes halfway."""
    order = Order("A-1001", "ada@example.com")
    mailer, audit = CustomerMailer(), AuditLog()
    order.attach(mailer)
    order.attach(audit)

    order.status = "paid"
    order.detach(mailer)
    order.status = "shipped"

    return [*mailer.sent, f"audit: {', '.join(audit.entries)}"]
