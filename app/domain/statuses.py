"""Status enums and display-only progress helpers.

The backend owns every transition; these helpers only decide how a status
is drawn (which steps are done, which one is current).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class OrderStatus:
    """Order lifecycle statuses."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    FINISHPROCESSING = "FINISHPROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    STEPS = (PENDING, CONFIRMED, PROCESSING, FINISHPROCESSING, SHIPPED, DELIVERED)
    ALL = STEPS + (CANCELLED,)
    TERMINAL = frozenset({DELIVERED, CANCELLED})
    # Statuses a shop may set from the orders control screen
    SHOP_SETTABLE = (PROCESSING, FINISHPROCESSING, SHIPPED, DELIVERED)

    @classmethod
    def normalize(cls, status: str | None) -> str:
        value = str(status or cls.PENDING).strip().upper().replace(" ", "_")
        aliases = {
            "FINISH_PROCESSING": cls.FINISHPROCESSING,
            "CANCELED": cls.CANCELLED,
            "COMPLETED": cls.DELIVERED,
        }
        return aliases.get(value, value)

    @classmethod
    def can_cancel(cls, status: str | None) -> bool:
        """Users may cancel only before the shop starts processing."""
        return cls.normalize(status) in (cls.PENDING, cls.CONFIRMED)


class RepairStatus:
    """Repair request workflow statuses."""

    SUBMITTED = "SUBMITTED"
    QUOTE_PENDING = "QUOTE_PENDING"
    QUOTE_SENT = "QUOTE_SENT"
    QUOTE_APPROVED = "QUOTE_APPROVED"
    QUOTE_REJECTED = "QUOTE_REJECTED"
    DEVICE_COLLECTED = "DEVICE_COLLECTED"
    REPAIRING = "REPAIRING"
    REPAIR_COMPLETED = "REPAIR_COMPLETED"
    DEVICE_DELIVERED = "DEVICE_DELIVERED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"

    STEPS = (
        SUBMITTED,
        QUOTE_PENDING,
        QUOTE_SENT,
        QUOTE_APPROVED,
        DEVICE_COLLECTED,
        REPAIRING,
        REPAIR_COMPLETED,
        DEVICE_DELIVERED,
    )
    ALL = (
        SUBMITTED,
        QUOTE_PENDING,
        QUOTE_SENT,
        QUOTE_APPROVED,
        QUOTE_REJECTED,
        DEVICE_COLLECTED,
        REPAIRING,
        REPAIR_COMPLETED,
        DEVICE_DELIVERED,
        CANCELLED,
        FAILED,
    )
    ABORTED = frozenset({QUOTE_REJECTED, CANCELLED, FAILED})
    TERMINAL = frozenset({DEVICE_DELIVERED, QUOTE_REJECTED, CANCELLED, FAILED})
    SHOP_SETTABLE = (QUOTE_PENDING, DEVICE_COLLECTED, REPAIRING, REPAIR_COMPLETED, FAILED)

    @classmethod
    def normalize(cls, status: str | None) -> str:
        value = str(status or cls.SUBMITTED).strip().upper()
        aliases = {
            "PENDING": cls.SUBMITTED,
            "REJECTED": cls.QUOTE_REJECTED,
            "IN_PROGRESS": cls.REPAIRING,
            "COMPLETED": cls.REPAIR_COMPLETED,
            "CANCELED": cls.CANCELLED,
        }
        return aliases.get(value, value)

    @classmethod
    def awaiting_decision(cls, status: str | None) -> bool:
        """A quote was sent and the user has not answered yet."""
        return cls.normalize(status) == cls.QUOTE_SENT

    @classmethod
    def can_cancel(cls, status: str | None) -> bool:
        return cls.normalize(status) in (cls.SUBMITTED, cls.QUOTE_PENDING, cls.QUOTE_SENT)


class DeliveryStatus:
    """Courier-side statuses for an assigned order or repair."""

    ASSIGNED = "ASSIGNED"
    PICKED_UP = "PICKED_UP"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    STEPS = (ASSIGNED, PICKED_UP, IN_TRANSIT, DELIVERED)
    UPDATABLE = (PICKED_UP, IN_TRANSIT, DELIVERED, CANCELLED)


class AccountStatus:
    """Admin-managed lifecycle of shops, deliveries and assigners."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    SUSPENDED = "SUSPENDED"

    ALL = (PENDING, APPROVED, SUSPENDED)

    @classmethod
    def normalize(cls, status: str | None) -> str:
        value = str(status or cls.PENDING).strip().upper()
        aliases = {"SUSPEND": cls.SUSPENDED, "VERIFIED": cls.APPROVED, "ACTIVE": cls.APPROVED}
        return aliases.get(value, value)


class StepState(str, Enum):
    COMPLETED = "completed"
    CURRENT = "current"
    FUTURE = "future"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class StepView:
    key: str
    state: StepState


def progress(
    steps: Sequence[str],
    current: str | None,
    aborted: frozenset[str] = frozenset({OrderStatus.CANCELLED}),
) -> list[StepView]:
    """Compare ``current`` against the fixed ``steps`` list.

    Steps before the current one are completed, the current one is current,
    the rest are future. An aborted status (cancelled, failed, rejected)
    completes nothing and is appended as a trailing CANCELLED step. An
    unknown status leaves every step in the future.
    """
    status = (current or "").strip().upper()
    if status in aborted:
        views = [StepView(step, StepState.FUTURE) for step in steps]
        views.append(StepView(status, StepState.CANCELLED))
        return views

    try:
        current_index = list(steps).index(status)
    except ValueError:
        return [StepView(step, StepState.FUTURE) for step in steps]

    views = []
    for index, step in enumerate(steps):
        if index < current_index:
            state = StepState.COMPLETED
        elif index == current_index:
            state = StepState.CURRENT
        else:
            state = StepState.FUTURE
        views.append(StepView(step, state))
    return views


def order_progress(status: str | None) -> list[StepView]:
    return progress(OrderStatus.STEPS, OrderStatus.normalize(status))


def repair_progress(status: str | None) -> list[StepView]:
    return progress(RepairStatus.STEPS, RepairStatus.normalize(status), aborted=RepairStatus.ABORTED)


def repair_wizard_steps(status: str | None) -> list[str]:
    """Steps of the repair request flow shown to the user.

    Delivery and payment steps appear only once the shop has sent a quote.
    """
    steps = ["device_type", "select_shop", "describe"]
    if RepairStatus.awaiting_decision(status):
        steps += ["delivery_address", "payment_method"]
    return steps
