"""Robot eligibility and the system groups used to filter the robot queue.

``SYSTEM_GROUPS`` is the only place that says which (system, court) pairs
the automation handles.  ``check_robot_eligibility`` and the queue filter
both read it, so they cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

__all__ = [
    "EligibilityRule",
    "SystemGroup",
    "SYSTEM_GROUPS",
    "TJMG",
    "check_robot_eligibility",
    "system_group_for",
]

TJMG = "Tribunal de Justiça de Minas Gerais"
TJSP = "Tribunal de Justiça de São Paulo"
TJRS = "Tribunal de Justiça do Rio Grande do Sul"
TJSC = "Tribunal de Justiça de Santa Catarina"
TJPR = "Tribunal de Justiça do Paraná"


@dataclass(frozen=True)
class EligibilityRule:
    """Matches one filing system, optionally restricted to some courts.

    ``courts=None`` means any court not listed in ``excluded_courts``.
    """

    system: str
    courts: Optional[frozenset[str]] = None
    excluded_courts: frozenset[str] = frozenset()

    def matches(self, system: str, court: str) -> bool:
        if system != self.system or court in self.excluded_courts:
            return False
        return self.courts is None or court in self.courts


@dataclass(frozen=True)
class SystemGroup:
    key: str
    label: str
    rules: tuple[EligibilityRule, ...]
    robot_eligible: bool = True

    def matches(self, system: str, court: str) -> bool:
        return any(rule.matches(system, court) for rule in self.rules)


SYSTEM_GROUPS: Mapping[str, SystemGroup] = MappingProxyType({
    group.key: group
    for group in (
        SystemGroup(
            key="pje-diversos",
            label="PJe Diversos",
            rules=(EligibilityRule("PJe", excluded_courts=frozenset({TJMG})),),
        ),
        SystemGroup(
            key="eproc-projudi",
            label="eProc RS/SC e Projudi PR",
            rules=(
                EligibilityRule("eProc", courts=frozenset({TJRS, TJSC})),
                EligibilityRule("Projudi", courts=frozenset({TJPR})),
            ),
        ),
        SystemGroup(
            key="esaj-sp",
            label="ESAJ SP",
            rules=(EligibilityRule("ESAJ", courts=frozenset({TJSP})),),
        ),
        # TJMG's PJe is shown as its own bucket but the robot does not file there.
        SystemGroup(
            key="pje-mg",
            label="PJe MG",
            rules=(EligibilityRule("PJe", courts=frozenset({TJMG})),),
            robot_eligible=False,
        ),
    )
})


def system_group_for(system: str, court: str) -> SystemGroup | None:
    """The group a (system, court) pair falls into, if any."""
    for group in SYSTEM_GROUPS.values():
        if group.matches(system, court):
            return group
    return None


def check_robot_eligibility(system: str, court: str) -> bool:
    """True if the automation can file for this system at this court."""
    group = system_group_for(system, court)
    return group is not None and group.robot_eligible
