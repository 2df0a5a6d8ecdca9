import logging

import sib_api_v3_sdk
from sib_api_v3_sdk.models import SendSmtpEmail
from sib_api_v3_sdk.rest import ApiException
from urllib3.exceptions import HTTPError

from errors import TransportError, ValidationError

logger = logging.getLogger(__name__)


REMINDER_SUBJECT = "Payment Reminder"
REMINDER_TEXT = (
    "Hello {name},\n\n"
    "You have a pending payment of {currency}{amount}. Please make the payment soon.\n\n"
    "Thank you!"
)


def make_mail_api(api_key):
    """Build the Brevo transactional email client used for the whole process."""
    configuration = sib_api_v3_sdk.Configuration()
    configuration.api_key['api-key'] = api_key
    return sib_api_v3_sdk.TransactionalEmailsApi(sib_api_v3_sdk.ApiClient(configuration))


def format_amount(amount):
    # a null amount is treated as nothing owed, like any other missing amount
    if amount is None:
        return "0"
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class ReminderNotifier:
    """Sends one payment reminder per call; failures are not retried."""

    def __init__(self, mail_api, sender, currency_symbol='₹'):
        self._mail_api = mail_api
        self._sender = sender
        self._currency_symbol = currency_symbol

    def build_message(self, email, name, amount_pending):
        text = REMINDER_TEXT.format(
            name=name,
            currency=self._currency_symbol,
            amount=format_amount(amount_pending),
        )
        return SendSmtpEmail(
            to=[{"email": email, "name": name}],
            sender={"email": self._sender},
            subject=REMINDER_SUBJECT,
            text_content=text,
        )

    def send_reminder(self, email, name, amount_pending):
        if not email or not name:
            raise ValidationError("Missing required fields")

        send_smtp_email = self.build_message(email, name, amount_pending)
        try:
            response = self._mail_api.send_transac_email(send_smtp_email)
        except (ApiException, HTTPError) as e:
            logger.error("Brevo error: %s", e)
            raise TransportError(str(e)) from e

        logger.info("Reminder sent to %s", email)
        return {'messageId': getattr(response, 'message_id', None)}
