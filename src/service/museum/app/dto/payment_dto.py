import attrs


@attrs.define(frozen=True)
class PaymentOrder:
    order_id: str
    amount: int  # smallest currency unit, e.g. cents
    currency: str
    key_id: str


@attrs.define(frozen=True)
class PaymentProof:
    """What the checkout widget hands back after a successful payment."""

    payment_id: str
    order_id: str
    signature: str


def to_minor_units(amount: float) -> int:
    """Dollars to cents, the unit orders are opened and fetched in."""
    return int(round(amount * 100))
