"""Domain models and types for cashdrawer.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Change-making logic separated from the CLI and config
"""

from cashdrawer.domain.ledger import ChangeLedger, Ledger, LedgerInvariantError, Till
from cashdrawer.domain.models import Cents, Denomination, Status, value_of
from cashdrawer.domain.money import format_money, to_cents, to_major
from cashdrawer.domain.settlement import ChangeResult, Settlement, compute_change, settle

__all__ = [
    "Cents",
    "ChangeLedger",
    "ChangeResult",
    "Denomination",
    "Ledger",
    "LedgerInvariantError",
    "Settlement",
    "Status",
    "Till",
    "compute_change",
    "format_money",
    "settle",
    "to_cents",
    "to_major",
    "value_of",
]
