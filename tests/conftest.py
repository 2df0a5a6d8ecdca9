"""Shared fixtures: an app on in-memory SQLite with a fake mail API."""

from types import SimpleNamespace

import pytest

from app import create_app
from notifier import ReminderNotifier
from settings import Settings


class FakeMailApi:
    """Stands in for Brevo's TransactionalEmailsApi."""

    def __init__(self):
        self.sent = []
        self.error = None

    def send_transac_email(self, send_smtp_email):
        if self.error is not None:
            raise self.error
        self.sent.append(send_smtp_email)
        return SimpleNamespace(message_id=f"<{len(self.sent)}@smtp-relay.test>")


@pytest.fixture
def mail_api():
    return FakeMailApi()


@pytest.fixture
def notifier(mail_api):
    return ReminderNotifier(mail_api, "bookings@example.com")


@pytest.fixture
def app(notifier):
    settings = Settings(database_url="sqlite://")
    app = create_app(settings, notifier=notifier)
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    with app.app_context():
        yield app.extensions["transaction_service"]


@pytest.fixture
def booking():
    return {
        "name": "Sam Rao",
        "phone": "9876543210",
        "email": "sam@example.com",
        "fromAddress": "Mumbai",
        "toAddress": "Goa",
        "bookingDate": "2025-01-15T10:30:00",
        "mode": "upi",
        "amountTotal": 1000,
        "amountAdvance": 300,
        "refundAmount": 0,
    }
