import logging
import uuid
from datetime import timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from errors import PersistenceError

logger = logging.getLogger(__name__)


db = SQLAlchemy()


def new_transaction_id():
    return uuid.uuid4().hex


class Transactions(db.Model):
    __tablename__ = 'transactions'
    id = db.Column(db.String(32), primary_key=True, default=new_transaction_id)
    name = db.Column(db.String(100), nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    email = db.Column(db.String(120), nullable=True)
    from_address = db.Column(db.String(200), nullable=True)
    to_address = db.Column(db.String(200), nullable=True)
    booking_date = db.Column(db.DateTime, nullable=True)
    mode = db.Column(db.String(50), nullable=True)  # payment method, e.g. 'cash', 'upi'
    amount_total = db.Column(db.Float, nullable=False, default=0)
    amount_advance = db.Column(db.Float, nullable=False, default=0)
    refund_amount = db.Column(db.Float, nullable=False, default=0)
    amount_pending = db.Column(db.Float, nullable=False, default=0)

    # JSON attribute name -> column name
    FIELDS = {
        'name': 'name',
        'phone': 'phone',
        'email': 'email',
        'fromAddress': 'from_address',
        'toAddress': 'to_address',
        'bookingDate': 'booking_date',
        'mode': 'mode',
        'amountTotal': 'amount_total',
        'amountAdvance': 'amount_advance',
        'refundAmount': 'refund_amount',
        'amountPending': 'amount_pending',
    }

    def to_dict(self):
        data = {'id': self.id}
        for key, column in self.FIELDS.items():
            data[key] = getattr(self, column)
        if self.booking_date is not None:
            data['bookingDate'] = self.booking_date.replace(tzinfo=timezone.utc).isoformat()
        return data

    def __repr__(self):
        return f'<Transaction {self.id}>'


class TransactionStore:
    """Persists Transactions rows through a Flask-SQLAlchemy session.

    Every failure of the underlying database is rolled back and re-raised
    as a PersistenceError carrying the driver's message.
    """

    def __init__(self, database=db):
        self._db = database

    @property
    def session(self):
        return self._db.session

    def insert(self, fields):
        transaction = Transactions(**fields)
        try:
            self.session.add(transaction)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail('insert', e)
        return transaction

    def list_all(self):
        try:
            return self.session.execute(self._db.select(Transactions)).scalars().all()
        except SQLAlchemyError as e:
            self._fail('list', e)

    def update(self, transaction_id, fields):
        """Apply ``fields`` to the row and return it, or None if it is gone."""
        try:
            transaction = self.session.get(Transactions, transaction_id)
            if transaction is None:
                return None
            for column, value in fields.items():
                setattr(transaction, column, value)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail('update', e)
        return transaction

    def delete(self, transaction_id):
        try:
            deleted = self.session.execute(
                self._db.delete(Transactions).where(Transactions.id == transaction_id)
            ).rowcount
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail('delete', e)
        return deleted > 0

    def _fail(self, operation, error):
        self.session.rollback()
        logger.error("Transaction %s failed: %s", operation, error)
        raise PersistenceError(str(error)) from error
