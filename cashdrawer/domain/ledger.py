"""Immutable denomination ledgers: the till and the change handed back.

A ledger holds one (denomination, cents) entry per denomination it has seen,
kept sorted by descending denomination value. Quantities are totals in cents,
not counts of coins: a till holding three quarters has (QUARTER, 75).

Every operation returns a new ledger; the original is never modified.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from cashdrawer.domain.models import Cents, Denomination, value_of
from cashdrawer.domain.money import to_cents, to_major

Entry = tuple[Denomination, Cents]


class LedgerInvariantError(RuntimeError):
    """Raised when a ledger operation would break the till's invariants."""


def sort_entries(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Sort entries by descending denomination value."""
    return tuple(sorted(entries, key=lambda entry: value_of(entry[0]), reverse=True))


def check_till_amount(denomination: Denomination, cents: Cents) -> None:
    """Validate an amount held in the till.

    Raises:
        ValueError: If the amount is negative or not a whole number of units.
    """
    if cents < 0:
        raise ValueError(f"Till amount for {denomination.value} must not be negative")
    if cents % value_of(denomination) != 0:
        raise ValueError(f"{to_major(cents)} is not a whole number of {denomination.value}")


@dataclass(frozen=True)
class Ledger:
    """Immutable, sorted collection of denomination entries."""

    entries: tuple[Entry, ...] = ()

    @classmethod
    def of(cls, entries: Iterable[Entry]) -> Self:
        """Build a ledger from entries in any order."""
        return cls(sort_entries(entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def sorted(self) -> list[Entry]:
        """Entries in descending denomination order."""
        return list(sort_entries(self.entries))

    def to_major(self) -> list[tuple[Denomination, Decimal]]:
        """Entries in descending denomination order, amounts in dollars."""
        return [(denomination, to_major(cents)) for denomination, cents in self.sorted()]

    def total(self) -> Cents:
        return Cents(sum(cents for _, cents in self.entries))

    def empty(self) -> bool:
        return self.total() == 0

    def quantity(self, denomination: Denomination) -> Cents:
        """Cents held in a denomination (zero if absent)."""
        for entry_denomination, cents in self.entries:
            if entry_denomination == denomination:
                return cents
        return Cents(0)

    def _index(self, denomination: Denomination) -> int | None:
        for i, (entry_denomination, _) in enumerate(self.entries):
            if entry_denomination == denomination:
                return i
        return None


@dataclass(frozen=True)
class ChangeLedger(Ledger):
    """Change accumulated for the customer. Starts empty, only grows."""

    def add(self, denomination: Denomination, amount: Cents | None = None) -> "ChangeLedger":
        """Add an amount of a denomination (one unit's value by default).

        Args:
            denomination: Denomination being handed over.
            amount: Cents to add. Defaults to value_of(denomination).

        Returns:
            New ChangeLedger including the amount.
        """
        increment = value_of(denomination) if amount is None else amount
        idx = self._index(denomination)

        if idx is None:
            return ChangeLedger.of([*self.entries, (denomination, increment)])

        entries = list(self.entries)
        entries[idx] = (denomination, Cents(entries[idx][1] + increment))
        return ChangeLedger(tuple(entries))


@dataclass(frozen=True)
class Till(Ledger):
    """Contents of the cash drawer. Populated from input, only depleted."""

    @classmethod
    def create(cls, contents: Iterable[tuple["str | Denomination", Decimal | int | float | str]]) -> "Till":
        """Build a till from (denomination, dollar amount) pairs.

        Repeated denominations are summed.

        Args:
            contents: Pairs such as ("QUARTER", 4.25).

        Returns:
            New Till sorted by descending denomination value.

        Raises:
            ValueError: If a denomination is unknown, an amount is invalid or
                negative, or a total is not a whole number of units.
        """
        totals: dict[Denomination, Cents] = {}
        for name, amount in contents:
            denomination = Denomination.parse(name)
            cents = to_cents(amount)
            if cents < 0:
                raise ValueError(f"Till amount for {denomination.value} must not be negative")
            totals[denomination] = Cents(totals.get(denomination, 0) + cents)

        for denomination, cents in totals.items():
            check_till_amount(denomination, cents)

        return cls.of(totals.items())

    def next_bill(self, owed: Cents) -> Denomination | None:
        """Pick the largest denomination still held that does not exceed owed.

        Args:
            owed: Remaining amount owed in cents.

        Returns:
            The denomination to hand over next, or None if nothing fits.
        """
        for denomination, cents in self.entries:
            if value_of(denomination) <= owed and cents > 0:
                return denomination
        return None

    def remove(self, denomination: Denomination) -> "Till":
        """Take one unit of a denomination out of the till.

        Raises:
            LedgerInvariantError: If the till does not hold the denomination.
        """
        idx = self._index(denomination)
        if idx is None:
            raise LedgerInvariantError(f"Till holds no {denomination.value}")

        remaining = self.entries[idx][1] - value_of(denomination)
        if remaining < 0:
            raise LedgerInvariantError(f"Till has less than one {denomination.value} left")

        entries = list(self.entries)
        entries[idx] = (denomination, Cents(remaining))
        return Till(tuple(entries))

    def set(self, denomination: Denomination, amount: Cents) -> "Till":
        """Replace the amount held in a denomination.

        Raises:
            ValueError: If the amount is negative or not a whole number of units.
        """
        check_till_amount(denomination, amount)
        others = [entry for entry in self.entries if entry[0] != denomination]
        return Till.of([*others, (denomination, amount)])
