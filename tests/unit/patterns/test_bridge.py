"""Unit tests for the Bridge example."""

from patternbook.patterns.bridge import (
    SMS_LIMIT,
    Alert,
    EmailChannel,
    Reminder,
    SmsChannel,
    demo,
)


def test_same_notification_over_different_channels():
    email, sms = EmailChannel(), SmsChannel()
    Alert(email, "disk full").send("ops@example.com")
    Alert(sms, "disk full").send("+100")

    assert email.outbox == ["To: ops@example.com\nSubject: ALERT\n\nDISK FULL"]
    assert sms.outbox == ["SMS +100: ALERT: DISK FULL"]


def test_reminder_body():
    message = Reminder(EmailChannel(), "renew", "today").send("a@example.com")
    assert message.endswith("'renew' is due today.")


def test_sms_is_truncated():
    message = Alert(SmsChannel(), "x" * 500).send("+100")
    text = message.split(": ", 1)[1]
    assert len(text) == SMS_LIMIT
    assert text.endswith("...")


def test_demo_uses_both_channels():
    lines = demo()
    assert any(line.startswith("To: ") for line in lines)
    assert any(line.startswith("SMS ") for line in lines)
