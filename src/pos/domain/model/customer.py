"""Customer entity: a name and a balance to pay from."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientBalanceError, ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Customer:

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def can_afford(self, amount: Money) -> bool:
        return self.balance >= amount

    def deduct(self, amount: Money) -> None:
        """Debit *amount* from the balance. The balance is never topped up."""
        if not self.can_afford(amount):
            raise InsufficientBalanceError(amount.amount, self.balance.amount)
        self.balance = self.balance - amount
