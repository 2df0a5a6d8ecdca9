"""
Request payloads accepted by the API.

Fields use the camelCase names clients send; unknown keys are dropped, and
a client-supplied ``amountPending`` on a transaction is ignored because the
service always derives it.
"""

from datetime import datetime, timezone
from typing import Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from errors import ValidationError

MONETARY_FIELDS = ('amount_total', 'amount_advance', 'refund_amount')


class TransactionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore', coerce_numbers_to_str=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    from_address: Optional[str] = Field(None, alias='fromAddress')
    to_address: Optional[str] = Field(None, alias='toAddress')
    booking_date: Optional[datetime] = Field(None, alias='bookingDate')
    mode: Optional[str] = Field(None, description="Payment method")
    amount_total: Optional[float] = Field(None, ge=0, alias='amountTotal')
    amount_advance: Optional[float] = Field(None, ge=0, alias='amountAdvance')
    refund_amount: Optional[float] = Field(None, ge=0, alias='refundAmount')

    @field_validator('booking_date')
    @classmethod
    def store_as_naive_utc(cls, value):
        # stored as naive UTC; naive input is taken to be UTC already
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def supplied(self):
        """Column values for the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class ReminderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    # null is accepted, only a missing key is rejected; text such as "1,200" is kept as sent
    amount_pending: Optional[Union[float, str]] = Field(..., alias='amountPending')


def parse(schema, payload):
    """Validate ``payload`` against ``schema`` or raise ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(describe(e)) from e


def describe(error):
    problems = []
    for item in error.errors():
        field = '.'.join(str(part) for part in item['loc'])
        problems.append(f"{field}: {item['msg']}")
    return '; '.join(problems)
