"""Storage — the hold a ship stockpiles mined resources in."""

from dataclasses import dataclass, field

from spacestation.models.resources import ResourceKind, ResourceType
from spacestation.models.warnings import GameWarning
from spacestation.transfer import deposit, give_from


def _make_counters(amount: int) -> dict[ResourceType, ResourceKind]:
    return {kind: ResourceKind(kind=kind, amount=amount) for kind in ResourceType}


@dataclass
class Storage:
    """One independently clamped counter per resource type."""

    _counters: dict[ResourceType, ResourceKind] = field(
        default_factory=lambda: _make_counters(0)
    )

    @classmethod
    def new(cls, amount: int) -> "Storage":
        """Create a storage with every counter starting at `amount` (clamped)."""
        storage = cls(_counters=_make_counters(amount))
        storage.adjust_levels()
        return storage

    def get_resource_amount(self, kind: ResourceType) -> int:
        return self._counters[kind].amount

    def amounts(self) -> dict[str, int]:
        """All counters keyed by resource type name."""
        return {str(kind): counter.amount for kind, counter in self._counters.items()}

    def is_empty(self) -> bool:
        return all(counter.amount == 0 for counter in self._counters.values())

    def counter(self, kind: ResourceType) -> ResourceKind:
        """The live counter for a resource type (mutations are visible here)."""
        return self._counters[kind]

    def receive_to_storage(self, resource: ResourceKind) -> GameWarning:
        """Deposit a resource into the matching counter."""
        return deposit(self._counters[resource.kind], resource)

    def give_resources(self, kind: ResourceType, amount: int) -> GameWarning:
        return give_from(self._counters[kind], kind, amount)

    def adjust_levels(self) -> None:
        for counter in self._counters.values():
            counter.adjust_levels()
