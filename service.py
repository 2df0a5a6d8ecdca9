"""Transaction service: business rules between the API and the store."""

import logging
from io import BytesIO

import pandas as pd

from model import TransactionStore
from pending import calculate_pending
from schemas import MONETARY_FIELDS, TransactionPayload, parse

logger = logging.getLogger(__name__)


EXPORT_COLUMNS = {
    'id': 'ID',
    'name': 'Name',
    'phone': 'Phone',
    'email': 'Email',
    'fromAddress': 'From',
    'toAddress': 'To',
    'bookingDate': 'Booking Date',
    'mode': 'Mode',
    'amountTotal': 'Amount Total',
    'amountAdvance': 'Amount Advance',
    'refundAmount': 'Refund Amount',
    'amountPending': 'Amount Pending',
}


class TransactionService:
    """CRUD operations on bookings, keeping ``amount_pending`` derived."""

    def __init__(self, store: TransactionStore):
        self._store = store

    def create(self, payload: dict) -> dict:
        fields = self._with_pending(parse(TransactionPayload, payload).supplied())
        transaction = self._store.insert(fields)
        logger.info("Created transaction %s", transaction.id)
        return transaction.to_dict()

    def list_all(self) -> list[dict]:
        return [t.to_dict() for t in self._store.list_all()]

    def update(self, transaction_id: str, payload: dict) -> dict | None:
        """
        Update a booking and recompute its pending amount.

        Text fields and the booking date are merged into the stored record.
        The monetary fields are not: any of total, advance or refund missing
        from this request is written as 0.

        Returns:
            The updated record, or None if no record has this id
        """
        fields = self._with_pending(parse(TransactionPayload, payload).supplied())
        transaction = self._store.update(transaction_id, fields)
        if transaction is None:
            logger.info("Update skipped, transaction %s not found", transaction_id)
            return None
        return transaction.to_dict()

    def delete(self, transaction_id: str) -> bool:
        """Hard delete; returns False when nothing matched the id."""
        deleted = self._store.delete(transaction_id)
        if deleted:
            logger.info("Deleted transaction %s", transaction_id)
        return deleted

    def export(self) -> BytesIO:
        """Write every booking to an in-memory Excel workbook."""
        data = [
            {label: record[key] for key, label in EXPORT_COLUMNS.items()}
            for record in self.list_all()
        ]
        df = pd.DataFrame(data, columns=list(EXPORT_COLUMNS.values()))
        output = BytesIO()
        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name='Transactions')

        output.seek(0)
        return output

    @staticmethod
    def _with_pending(fields):
        for column in MONETARY_FIELDS:
            if fields.get(column) is None:
                fields[column] = 0
        fields['amount_pending'] = calculate_pending(
            fields['amount_total'], fields['amount_advance'], fields['refund_amount']
        )
        return fields
