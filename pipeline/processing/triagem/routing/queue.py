"""Queue router — decides whether a protocol goes to the robot or a person."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Literal, Optional

from models.protocolo import ProtocolForm, ProtocolSchema

from triagem import config
from triagem.routing.eligibility import SYSTEM_GROUPS, check_robot_eligibility

logger = logging.getLogger(__name__)

__all__ = [
    "ROBOT_QUEUE",
    "RoutingDecision",
    "RoutingReason",
    "determine_queue_assignment",
    "manual_queue",
    "queue_position",
    "robot_queue",
    "route_protocol",
]

ROBOT_QUEUE = "robot"
SECOND_INSTANCE = "2º Grau"


class RoutingReason(str, Enum):
    RESUBMISSION = "resubmission"
    DISTRIBUTION = "distribution"
    OBSERVATIONS = "observations"
    SECOND_INSTANCE = "second_instance"
    ROBOT_INELIGIBLE = "robot_ineligible"
    ROBOT_ELIGIBLE = "robot_eligible"


@dataclass(frozen=True)
class RoutingDecision:
    target: Literal["robot", "manual"]
    reason: RoutingReason
    handler: Optional[str] = None

    @property
    def assigned_to(self) -> str | None:
        """Value stored on the protocol (``None`` is the robot queue)."""
        return self.handler if self.target == "manual" else None

    @property
    def queue(self) -> str:
        return self.handler if self.handler is not None else ROBOT_QUEUE


def route_protocol(
    form: ProtocolForm,
    is_distribution: bool | None = None,
    *,
    is_resubmission: bool = False,
    fallback_handler: str | None = None,
) -> RoutingDecision:
    """Route a (possibly incomplete) protocol form.

    Rules, first match wins:

    1. resubmitted after a return -> manual
    2. distribution -> manual
    3. any observations -> manual
    4. second instance (``2º Grau``) -> manual
    5. system/court the robot cannot handle -> manual
    6. otherwise -> robot

    Args:
        form: Operator-entered fields.
        is_distribution: Distribution flag; ``None`` reads it from *form*.
        is_resubmission: The protocol was returned and is being sent again.
        fallback_handler: Manual handler override. Uses
            ``TRIAGEM_FALLBACK_HANDLER`` by default.
    """
    handler = fallback_handler if fallback_handler is not None else config.FALLBACK_HANDLER
    if is_distribution is None:
        is_distribution = form.is_distribution

    if is_resubmission:
        reason = RoutingReason.RESUBMISSION
    elif is_distribution:
        reason = RoutingReason.DISTRIBUTION
    elif form.observations.strip():
        reason = RoutingReason.OBSERVATIONS
    elif form.jurisdiction == SECOND_INSTANCE:
        reason = RoutingReason.SECOND_INSTANCE
    elif not check_robot_eligibility(form.system, form.court):
        reason = RoutingReason.ROBOT_INELIGIBLE
    else:
        return RoutingDecision(target="robot", reason=RoutingReason.ROBOT_ELIGIBLE)

    logger.debug(
        "routing: %s -> %s (%s)", form.process_number or "<no number>", handler, reason.value
    )
    return RoutingDecision(target="manual", reason=reason, handler=handler)


def determine_queue_assignment(
    form: ProtocolForm,
    is_distribution: bool | None = None,
    *,
    is_resubmission: bool = False,
    fallback_handler: str | None = None,
) -> str:
    """``"robot"`` or the name of the manual handler for *form*."""
    return route_protocol(
        form,
        is_distribution,
        is_resubmission=is_resubmission,
        fallback_handler=fallback_handler,
    ).queue


def _oldest_first(protocols: Iterable[ProtocolSchema]) -> list[ProtocolSchema]:
    return sorted(protocols, key=lambda p: p.created_at)


def robot_queue(
    protocols: Iterable[ProtocolSchema],
    group_key: str | None = None,
) -> list[ProtocolSchema]:
    """Pending, unassigned protocols, oldest first, optionally narrowed to one
    system group.

    Raises:
        KeyError: If *group_key* is not a ``SYSTEM_GROUPS`` key.
    """
    group = SYSTEM_GROUPS[group_key] if group_key is not None else None
    return _oldest_first(
        p
        for p in protocols
        if p.is_pending
        and p.assigned_to is None
        and (group is None or group.matches(p.system, p.court))
    )


def manual_queue(protocols: Iterable[ProtocolSchema], handler: str) -> list[ProtocolSchema]:
    """Pending protocols assigned to *handler*, oldest first."""
    return _oldest_first(p for p in protocols if p.is_pending and p.assigned_to == handler)


def queue_position(protocol: ProtocolSchema, queue: Iterable[ProtocolSchema]) -> int | None:
    """1-based place of *protocol* among the waiting protocols of *queue*.

    Only ``Aguardando`` protocols hold a place; anything else, or a protocol
    not in *queue*, gets ``None``.
    """
    if protocol.status != "Aguardando":
        return None
    waiting = _oldest_first(p for p in queue if p.status == "Aguardando")
    for position, candidate in enumerate(waiting, start=1):
        if candidate.id == protocol.id:
            return position
    return None
