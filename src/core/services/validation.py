"""Business rules for incoming orders.

The validator is the single place where order-entry rules live. The use
cases call it before touching a repository, and the domain model only keeps
structural invariants (types, positive amount, currency shape).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from core.config import AppSettings
from core.domain.errors import (
    InvalidEmailError,
    InvalidOrderAmountError,
    InvalidOrderError,
)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")

# Same limits as the `Order` fields.
MAX_USER_ID_LENGTH = 128
MAX_EMAIL_LENGTH = 320


@dataclass
class CreateOrderCommand:
    """Raw input for the create-order use case."""

    user_id: str
    email: str
    amount: Decimal | int | float | str
    currency: str | None = None


@dataclass(frozen=True)
class ValidatedOrder:
    """Normalised values that passed every rule."""

    user_id: str
    email: str
    amount: Decimal
    currency: str


def _to_decimal(value: object) -> Decimal | None:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        # Floats go through their shortest repr: 0.1 -> Decimal("0.1").
        value = str(value)
    try:
        return Decimal(value)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError, ValueError):
        return None


class OrderValidator:
    """Checks a `CreateOrderCommand` against the configured rules."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def validate(self, command: CreateOrderCommand) -> ValidatedOrder:
        """Return normalised values or raise the first violation found."""

        errors = self.collect_errors(command)
        if errors:
            raise errors[0]

        return ValidatedOrder(
            user_id=command.user_id.strip(),
            email=command.email.strip().lower(),
            amount=self._parse_amount(command.amount),
            currency=self._currency_of(command),
        )

    def collect_errors(self, command: CreateOrderCommand) -> list[InvalidOrderError]:
        """Report every violation without raising."""

        errors: list[InvalidOrderError] = []

        user_id = command.user_id.strip() if isinstance(command.user_id, str) else ""
        if not user_id:
            errors.append(InvalidOrderError("user_id", "user id is required"))
        elif len(user_id) > MAX_USER_ID_LENGTH:
            errors.append(
                InvalidOrderError("user_id", f"must be at most {MAX_USER_ID_LENGTH} characters")
            )

        email = command.email.strip() if isinstance(command.email, str) else ""
        if len(email) > MAX_EMAIL_LENGTH or not _EMAIL_RE.match(email):
            errors.append(InvalidEmailError(str(command.email)))

        try:
            self._parse_amount(command.amount)
        except InvalidOrderAmountError as exc:
            errors.append(exc)

        currency = self._currency_of(command)
        if not _CURRENCY_RE.match(currency):
            errors.append(InvalidOrderError("currency", f"{currency!r} is not a three-letter code"))
        elif self._settings.allowed_currencies and currency not in self._settings.allowed_currencies:
            errors.append(InvalidOrderError("currency", f"{currency!r} is not accepted"))

        return errors

    def _currency_of(self, command: CreateOrderCommand) -> str:
        raw = command.currency if command.currency is not None else self._settings.default_currency
        return str(raw).strip().upper()

    def _parse_amount(self, raw: object) -> Decimal:
        """Return the amount as a `Decimal` or raise `InvalidOrderAmountError`."""

        amount = _to_decimal(raw)
        if amount is None:
            raise InvalidOrderAmountError(raw, "not a number")
        if not amount.is_finite():
            raise InvalidOrderAmountError(raw, "must be finite")
        if amount <= self._settings.min_order_amount:
            raise InvalidOrderAmountError(
                raw, f"must be greater than {self._settings.min_order_amount}"
            )
        if amount > self._settings.max_order_amount:
            raise InvalidOrderAmountError(
                raw, f"must not exceed {self._settings.max_order_amount}"
            )
        exponent = amount.normalize().as_tuple().exponent
        if isinstance(exponent, int) and exponent < -2:
            raise InvalidOrderAmountError(raw, "at most two decimal places")
        return amount
