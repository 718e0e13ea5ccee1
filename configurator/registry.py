"""Static catalogue of the capabilities the configurator can add.

The order of :data:`CAPABILITIES` is the application priority: the
orchestrator always applies capabilities in this order regardless of the order
in which they were requested. Tailwind goes first so that later handlers can
pick their Tailwind content variant; redux precedes reactQuery so the
providers file is regenerated with both layers in place.
"""

from __future__ import annotations

from collections.abc import Iterable

from configurator.models import Capability


class UnknownCapabilityError(ValueError):
    """Raised when a capability id is not in the registry."""

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"Unknown capability: {capability}")


CAPABILITIES: list[Capability] = [
    Capability(name="Tailwind CSS", value="tailwind", description="Utility-first CSS framework"),
    Capability(
        name="Redux Toolkit", value="redux", description="Predictable global state management"
    ),
    Capability(name="React Query", value="reactQuery", description="Data fetching and caching"),
    Capability(
        name="Forms (React Hook Form + Zod)",
        value="forms",
        description="Form validation and handling",
    ),
    Capability(
        name="Toast Notifications (Sonner)",
        value="toast",
        description="Beautiful toast notifications",
    ),
]

CAPABILITY_IDS: list[str] = [cap.value for cap in CAPABILITIES]


def is_known(capability: str) -> bool:
    return capability in CAPABILITY_IDS


def get_capability(capability: str) -> Capability:
    """Return the registry entry for *capability* or raise :class:`UnknownCapabilityError`."""
    for cap in CAPABILITIES:
        if cap.value == capability:
            return cap
    raise UnknownCapabilityError(capability)


def order_by_priority(capabilities: Iterable[str]) -> list[str]:
    """Sort requested ids into registry priority order.

    Duplicates are dropped. Ids the registry does not know keep their request
    order and go last, so they still get attempted (and reported) by the
    orchestrator.
    """
    requested: list[str] = []
    for cap in capabilities:
        if cap not in requested:
            requested.append(cap)

    known = [cap for cap in CAPABILITY_IDS if cap in requested]
    unknown = [cap for cap in requested if not is_known(cap)]
    return known + unknown
