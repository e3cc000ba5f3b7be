"""Bridge pattern: notifications sent over interchangeable channels.

The notification hierarchy (what is said) and the channel hierarchy (how it is
delivered) vary independently; a notification holds a channel rather than
subclassing one.
"""

from __future__ import annotations

import abc

SMS_LIMIT = 160


class Channel(abc.ABC):
    """Implementor: delivers a subject and a body somewhere."""

    def __init__(self) -> None:
        self.outbox: list[str] = []

    @abc.abstractmethod
    def deliver(self, recipient: str, subject: str, body: str) -> str:
        """Deliver a message and return what was sent."""


class EmailChannel(Channel):
    """Formats a plain-text email and keeps it in `outbox`."""

    def deliver(self, recipient: str, subject: str, body: str) -> str:
        message = f"To: {recipient}\nSubject: {subject}\n\n{body}"
        self.outbox.append(message)
        return message


class SmsChannel(Channel):
    """Text messages have no subject line and are cut to 160 characters."""

    def deliver(self, recipient: str, subject: str, body: str) -> str:
        text = f"{subject}: {body}"
        if len(text) > SMS_LIMIT:
            text = text[: SMS_LIMIT - 3] + "..."
        message = f"SMS {recipient}: {text}"
        self.outbox.append(message)
        return message


class Notification(abc.ABC):
    """Abstraction: decides the content, delegates delivery to its channel."""

    def __init__(self, channel: Channel) -> None:
        self.channel = channel

    @abc.abstractmethod
    def send(self, recipient: str) -> str:
        """Send the notification to `recipient` through the channel."""


class Alert(Notification):
    """Urgent notice: subject "ALERT", problem shouted in upper case."""

    def __init__(self, channel: Channel, problem: str) -> None:
        super().__init__(channel)
        self.problem = problem

    def send(self, recipient: str) -> str:
        return self.channel.deliver(recipient, "ALERT", self.problem.upper())


class Reminder(Notification):
    """Polite notice that a task is due."""

    def __init__(self, channel: Channel, task: str, due: str) -> None:
        super().__init__(channel)
        self.task = task
        self.due = due

    def send(self, recipient: str) -> str:
        return self.channel.deliver(
            recipient, "Reminder", f"'{self.task}' is due {self.due}."
        )


def demo() -> list[str]:
    """Send the same two notifications over both channels."""
    lines = []
    for channel in (EmailChannel(), SmsChannel()):
        for notification in (
            Alert(channel, "disk almost full"),
            Reminder(channel, "renew certificate", "on Friday"),
        ):
            lines.extend(notification.send("ops@example.com").splitlines())
    return lines
