"""Domain type definitions for cashdrawer.

These types provide semantic clarity and help with type checking:
- Cents: Amount in cents (minor units)
- Denomination: One of the nine coins and bills a till can hold
- Status: Outcome of a settlement
"""

from enum import Enum
from types import MappingProxyType
from typing import NewType

# Money amounts are held as cents (minor units) to avoid floating point errors
Cents = NewType("Cents", int)


class Denomination(str, Enum):
    """Coins and bills recognised by the till."""

    PENNY = "PENNY"
    NICKEL = "NICKEL"
    DIME = "DIME"
    QUARTER = "QUARTER"
    ONE = "ONE"
    FIVE = "FIVE"
    TEN = "TEN"
    TWENTY = "TWENTY"
    ONE_HUNDRED = "ONE HUNDRED"

    @classmethod
    def parse(cls, name: "str | Denomination") -> "Denomination":
        """Parse a denomination identifier.

        Matching is case-insensitive and accepts '_' or '-' in place of the
        space in 'ONE HUNDRED'.

        Args:
            name: Identifier such as "QUARTER" or "one_hundred".

        Returns:
            The matching Denomination.

        Raises:
            ValueError: If the identifier is not a known denomination.
        """
        if isinstance(name, Denomination):
            return name

        normalized = " ".join(str(name).replace("_", " ").replace("-", " ").upper().split())
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown denomination '{name}' (expected one of: {valid})") from None


class Status(str, Enum):
    """Outcome of settling a transaction against the till."""

    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    CLOSED = "CLOSED"
    OPEN = "OPEN"


DENOMINATION_VALUES: MappingProxyType[Denomination, Cents] = MappingProxyType(
    {
        Denomination.PENNY: Cents(1),
        Denomination.NICKEL: Cents(5),
        Denomination.DIME: Cents(10),
        Denomination.QUARTER: Cents(25),
        Denomination.ONE: Cents(100),
        Denomination.FIVE: Cents(500),
        Denomination.TEN: Cents(1000),
        Denomination.TWENTY: Cents(2000),
        Denomination.ONE_HUNDRED: Cents(10000),
    }
)


def value_of(denomination: Denomination) -> Cents:
    """Get the value of one unit of a denomination in cents."""
    return DENOMINATION_VALUES[denomination]
