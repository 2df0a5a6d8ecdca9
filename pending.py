def calculate_pending(total=0, advance=0, refund=0):
    """Return the outstanding balance of a booking.

    Once a refund is recorded the pending amount is what is left of the
    advance after the refund; otherwise it is the remainder of the total.
    Missing values count as 0. Results are not clamped.
    """
    total = total or 0
    advance = advance or 0
    refund = refund or 0

    if refund > 0:
        return advance - refund
    return total - advance
