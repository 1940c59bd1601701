"""Pure functions for settling a cash transaction against the till.

This module contains the functional core for making change:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All decisions are made in cents (Cents type). Dollar amounts only appear in
the inputs and in the ChangeResult.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from cashdrawer.domain.ledger import ChangeLedger, Till
from cashdrawer.domain.models import Cents, Denomination, Status, value_of
from cashdrawer.domain.money import to_cents

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str
TillInput = Till | Iterable[tuple["str | Denomination", Amount]]


@dataclass(frozen=True)
class ChangeResult:
    """Immutable outcome of a settlement."""

    status: Status
    change: tuple[tuple[Denomination, Decimal], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "change", tuple(self.change))

    def change_total(self) -> Cents:
        """Total change handed over, in cents."""
        return Cents(sum(to_cents(amount) for _, amount in self.change))

    def as_dict(self) -> dict[str, Any]:
        """Plain-value form, e.g. {"status": "OPEN", "change": [["QUARTER", 0.5]]}."""
        return {
            "status": self.status.value,
            "change": [[denomination.value, float(amount)] for denomination, amount in self.change],
        }


@dataclass(frozen=True)
class Settlement:
    """Immutable settlement: the result plus the till left behind."""

    result: ChangeResult
    till: Till


def _as_till(till: TillInput) -> Till:
    return till if isinstance(till, Till) else Till.create(till)


def settle(price: Amount, cash: Amount, till: TillInput) -> Settlement:
    """Settle a transaction and report what is left in the till.

    Args:
        price: Price of the purchase in dollars.
        cash: Cash tendered in dollars.
        till: Till contents, as a Till or (denomination, dollars) pairs.

    Returns:
        Settlement with the change result and the till after paying out.
        The till is unchanged for INSUFFICIENT_FUNDS and emptied for CLOSED.
    """
    drawer = _as_till(till)
    owed = Cents(to_cents(cash) - to_cents(price))

    if drawer.total() == owed:
        logger.debug("Till total %d matches owed amount, closing drawer", owed)
        emptied = Till.of((denomination, Cents(0)) for denomination, _ in drawer)
        return Settlement(ChangeResult(Status.CLOSED, tuple(drawer.to_major())), emptied)

    change = ChangeLedger()
    remaining = drawer
    while owed != 0:
        denomination = remaining.next_bill(owed)
        if denomination is None:
            logger.debug("No denomination fits %d cents owed, insufficient funds", owed)
            return Settlement(ChangeResult(Status.INSUFFICIENT_FUNDS), drawer)

        change = change.add(denomination)
        remaining = remaining.remove(denomination)
        owed = Cents(owed - value_of(denomination))
        logger.debug("Paid one %s, %d cents still owed", denomination.value, owed)

    return Settlement(ChangeResult(Status.OPEN, tuple(change.to_major())), remaining)


def compute_change(price: Amount, cash: Amount, till: TillInput) -> ChangeResult:
    """Compute the change for a cash transaction.

    Args:
        price: Price of the purchase in dollars.
        cash: Cash tendered in dollars.
        till: Till contents, as a Till or (denomination, dollars) pairs.

    Returns:
        ChangeResult with status CLOSED (the whole till is the change),
        OPEN (itemized change) or INSUFFICIENT_FUNDS (empty change).
    """
    return settle(price, cash, till).result
