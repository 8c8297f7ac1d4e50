"""Transfer protocol — moving resource amounts between holders.

Pure functions operating on the ResourceKind counters a holder owns.
Ships, motherships and environment resources delegate to these, so the
rules live in one place.

The two halves of a transfer are not atomic: if the receiving side fails
after the source has given, the source is not refunded.
"""

import logging
from typing import Protocol

from spacestation.helpers.levels import is_saturated
from spacestation.models.resources import ResourceKind, ResourceType
from spacestation.models.warnings import GameWarning

logger = logging.getLogger(__name__)

# A give that would leave exactly this remainder is refused. Other negative
# remainders are allowed through and left for the level cap to clamp.
INSUFFICIENT_REMAINDER = -1


class TransferResources(Protocol):
    """Anything resources can be taken from."""

    def give_resources(self, kind: ResourceType, amount: int) -> GameWarning: ...


def on_kind_mismatch(held: ResourceKind, requested: ResourceType) -> GameWarning:
    """Policy for a give request whose type differs from the held resource.

    Currently a no-op that reports success.
    """
    logger.debug(
        "Give of %s ignored: holder stores %s", requested, held.kind
    )
    return GameWarning.NOMINAL


def give_from(held: ResourceKind, kind: ResourceType, amount: int) -> GameWarning:
    """Spend `amount` of `kind` from a held counter.

    Returns RESOURCE_EXHAUSTED (counter unchanged) when the remainder
    would be exactly -1, NOMINAL otherwise.
    """
    if not held.matches(kind):
        return on_kind_mismatch(held, kind)

    remainder = held.amount - amount
    if remainder == INSUFFICIENT_REMAINDER:
        logger.debug(
            "Insufficient %s: has %d, asked for %d", kind, held.amount, amount
        )
        return GameWarning.RESOURCE_EXHAUSTED

    held.amount = remainder
    return GameWarning.NOMINAL


def receive_into(
    counter: ResourceKind, request: ResourceKind, source: TransferResources
) -> GameWarning:
    """Take `request` from `source` and add it to `counter`, then clamp.

    The counter is left untouched when the source refuses to give.
    """
    result = source.give_resources(request.kind, request.amount)
    if not result.ok:
        return result

    counter.amount += request.amount
    counter.adjust_levels()
    return GameWarning.NOMINAL


def deposit(counter: ResourceKind, resource: ResourceKind) -> GameWarning:
    """Add a resource's amount into a storage counter, then clamp.

    Rejected only when the counter is already saturated; a deposit that
    overflows is clamped and the excess is lost.
    """
    if is_saturated(counter.amount):
        return GameWarning.SHIP_STORAGE_FULL

    counter.amount += resource.amount
    counter.adjust_levels()
    return GameWarning.NOMINAL
