"""Configuration for the booking ledger backend."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class Settings:
    """Values read from the environment (and a local .env file)."""

    database_url: str = 'sqlite:///bookings.db'
    brevo_api_key: str | None = None
    mail_sender: str | None = None
    currency_symbol: str = '₹'
    port: int = 5000
    debug: bool = False

    @classmethod
    def load(cls) -> 'Settings':
        load_dotenv()
        return cls(
            database_url=os.environ.get('DATABASE_URL', cls.database_url),
            brevo_api_key=os.getenv('BREVO_API_KEY'),
            mail_sender=os.getenv('MAIL_USERNAME'),
            currency_symbol=os.getenv('CURRENCY_SYMBOL', cls.currency_symbol),
            port=int(os.getenv('PORT', cls.port)),
            debug=os.getenv('FLASK_DEBUG', '').lower() in ('1', 'true', 'yes'),
        )
