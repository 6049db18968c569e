"""Queue routing — robot eligibility, system groups and the router."""

from triagem.routing.eligibility import (
    SYSTEM_GROUPS,
    EligibilityRule,
    SystemGroup,
    check_robot_eligibility,
    system_group_for,
)
from triagem.routing.queue import (
    ROBOT_QUEUE,
    RoutingDecision,
    RoutingReason,
    determine_queue_assignment,
    manual_queue,
    queue_position,
    robot_queue,
    route_protocol,
)

__all__ = [
    "SYSTEM_GROUPS",
    "EligibilityRule",
    "SystemGroup",
    "check_robot_eligibility",
    "system_group_for",
    "ROBOT_QUEUE",
    "RoutingDecision",
    "RoutingReason",
    "determine_queue_assignment",
    "manual_queue",
    "queue_position",
    "robot_queue",
    "route_protocol",
]
