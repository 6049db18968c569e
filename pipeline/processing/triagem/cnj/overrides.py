"""State-court (J = 8) filing-system overrides.

Several state courts run more than one filing system at once.  The base
table holds each court's default; the rules below pick the actual system
from the sequential number, the filing year or the origin unit.  Courts
without a rule keep the table's value.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

if TYPE_CHECKING:
    from triagem.cnj.parser import CnjNumber

__all__ = [
    "STATE_JUSTICE_BRANCH",
    "STATE_SYSTEM_RULES",
    "resolve_state_system",
]

STATE_JUSTICE_BRANCH = "8"

SystemRule = Callable[["CnjNumber"], str]


def _amazonas(cnj: CnjNumber) -> str:
    return "Projudi" if cnj.origin == "1000" else "ESAJ"


def _bahia(cnj: CnjNumber) -> str:
    return "PJe" if cnj.sequential.startswith("8") else "Projudi"


def _ceara(cnj: CnjNumber) -> str:
    return "PJe" if cnj.sequential.startswith("3") else "ESAJ"


def _minas_gerais(cnj: CnjNumber) -> str:
    if cnj.sequential[0] in ("5", "6"):
        return "PJe"
    if cnj.sequential.startswith("1") and cnj.year == "2025":
        return "eProc"
    return "PJe"


def _rio_de_janeiro(cnj: CnjNumber) -> str:
    if cnj.sequential[:2] in ("08", "09") or cnj.sequential[:3] in ("008", "009"):
        return "PJe"
    return "TJRJ Eletrônico"


def _sao_paulo(cnj: CnjNumber) -> str:
    return "eProc SP" if cnj.sequential.startswith("4") else "ESAJ"


STATE_SYSTEM_RULES: Mapping[str, SystemRule] = MappingProxyType({
    "04": _amazonas,
    "05": _bahia,
    "06": _ceara,
    "13": _minas_gerais,
    "19": _rio_de_janeiro,
    "26": _sao_paulo,
})


def resolve_state_system(cnj: CnjNumber, base_system: str) -> str:
    """Filing system for a state-court number, falling back to *base_system*."""
    rule = STATE_SYSTEM_RULES.get(cnj.court_code)
    if rule is None:
        return base_system
    return rule(cnj)
