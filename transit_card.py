from enum import Enum
from typing import List, Optional
from decimal import Decimal, InvalidOperation
from collections import deque
import logging


logger = logging.getLogger("transit_card")


MAX_RECHARGE = Decimal('200.00')
HISTORY_SIZE = 5


# ==================== Enums ====================

class CardStatus(Enum):
    """Status of a transit card"""
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"


# ==================== Errors ====================

class TransitCardError(Exception):
    """Base class for transit card errors"""
    pass


class InvalidArgumentError(TransitCardError, ValueError):
    """Raised when the caller passes a structurally invalid value"""

    def __init__(self, message: str, param: Optional[str] = None):
        super().__init__(message)
        self.param = param


class InvalidStateError(TransitCardError):
    """Raised when the card's current state does not allow the operation"""
    pass


def _to_amount(value, param: str) -> Decimal:
    """Coerce a monetary input to Decimal"""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{param} must be a number", param)
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgumentError(f"{param} must be a number", param) from None
    if not amount.is_finite():
        raise InvalidArgumentError(f"{param} must be a finite number", param)
    return amount


# ==================== Transit Card ====================

class TransitCard:
    """
    Fare card with a balance, a recharge ceiling, an active/blocked status and
    a fixed-depth history of the most recent recharges (most recent first).

    Every operation validates before mutating, so a failed call leaves the
    card exactly as it was. Blocking is one-way.
    """

    def __init__(self, card_id: str, max_recharge: Decimal = MAX_RECHARGE,
                 history_size: int = HISTORY_SIZE):
        if not isinstance(card_id, str) or not card_id.strip():
            raise InvalidArgumentError("card id must not be empty", "card_id")

        max_recharge = _to_amount(max_recharge, "max_recharge")
        if max_recharge <= 0:
            raise InvalidArgumentError("max_recharge must be greater than zero", "max_recharge")

        if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size <= 0:
            raise InvalidArgumentError("history_size must be a positive integer", "history_size")

        self._card_id = card_id
        self._balance = Decimal('0')
        self._status = CardStatus.ACTIVE
        self._max_recharge = max_recharge
        self._history = deque([Decimal('0')] * history_size, maxlen=history_size)

    def get_id(self) -> str:
        return self._card_id

    def get_balance(self) -> Decimal:
        return self._balance

    def get_status(self) -> CardStatus:
        return self._status

    def is_blocked(self) -> bool:
        return self._status == CardStatus.BLOCKED

    def get_max_recharge(self) -> Decimal:
        return self._max_recharge

    def recharge(self, amount: Decimal) -> None:
        """Add credit to the card and record it in the history"""
        if self.is_blocked():
            logger.debug("Rejected recharge on blocked card %s", self._card_id)
            raise InvalidStateError("cannot recharge a blocked card")

        amount = _to_amount(amount, "amount")
        if amount <= 0 or amount > self._max_recharge:
            logger.debug("Rejected recharge of %s on card %s", amount, self._card_id)
            raise InvalidArgumentError(
                f"recharge amount must be greater than zero and not exceed "
                f"the maximum of {self._max_recharge}", "amount")

        self._balance += amount
        # maxlen drops the oldest entry from the right
        self._history.appendleft(amount)
        logger.debug("Card %s recharged with %s, balance %s",
                     self._card_id, amount, self._balance)

    def pay_fare(self, tariff: Decimal) -> None:
        """Debit a fare from the card"""
        if self.is_blocked():
            logger.debug("Rejected fare payment on blocked card %s", self._card_id)
            raise InvalidStateError("cannot use a blocked card")

        tariff = _to_amount(tariff, "tariff")
        if tariff <= 0:
            raise InvalidArgumentError("tariff must be greater than zero", "tariff")

        if self._balance < tariff:
            logger.debug("Insufficient balance on card %s: %s < %s",
                         self._card_id, self._balance, tariff)
            raise InvalidStateError("insufficient balance")

        self._balance -= tariff
        logger.debug("Card %s paid fare %s, balance %s",
                     self._card_id, tariff, self._balance)

    def block(self) -> None:
        """Block the card. Blocking an already blocked card is a no-op."""
        if self._status != CardStatus.BLOCKED:
            self._status = CardStatus.BLOCKED
            logger.info("Card %s blocked", self._card_id)

    def get_recharge_history(self) -> List[Decimal]:
        """Last recharges, most recent first, padded with zeros"""
        return list(self._history)

    def __repr__(self) -> str:
        return (f"TransitCard(id={self._card_id}, balance={self._balance}, "
                f"status={self._status.value})")


# Design Highlights

# State: CardStatus is a closed enum (ACTIVE, BLOCKED) rather than a flag;
# block() is the only transition and there is no way back.

# Validation before mutation: recharge and pay_fare check status first, then
# the amount, then (for fares) the balance. Nothing changes unless every check
# passes, so balance never goes negative.

# History: a deque with maxlen gives the fixed-depth, most-recent-first ring;
# appendleft evicts the oldest entry. get_recharge_history() hands out a new
# list so callers never alias the internal buffer.

# Money: Decimal throughout; ints, strings and floats are coerced through str().
