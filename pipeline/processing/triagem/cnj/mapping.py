"""Static CNJ lookup table: justice branch (J) -> court code (TR) -> court.

Also holds the vocabulary the intake form offers in its dropdowns.  Every
``system`` the classifier can emit must appear in ``TRIBUNAL_SYSTEMS``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from models.tribunal import TribunalInfo

__all__ = [
    "BRANCH_NAMES",
    "CNJ_MAPPING",
    "COURTS",
    "PETITION_TYPES",
    "PROCESS_TYPES",
    "PROCURATION_TYPES",
    "TRIBUNAL_SYSTEMS",
    "UNIDENTIFIED_SYSTEM",
    "lookup_court",
]

UNIDENTIFIED_SYSTEM = "Sistema não identificado"

TRIBUNAL_SYSTEMS: tuple[str, ...] = (
    "ESAJ",
    "PJe",
    "Projudi",
    "TJRJ Eletrônico",
    "eProc",
    "eProc SP",
    "Portal do Adv",
    UNIDENTIFIED_SYSTEM,
)

BRANCH_NAMES: Mapping[str, str] = MappingProxyType({
    "1": "Tribunais Superiores",
    "2": "Justiça Militar",
    "3": "Justiça Eleitoral",
    "4": "Justiça Federal",
    "5": "Justiça do Trabalho",
    "8": "Justiça Estadual",
})


def _courts(process_type: str, rows: dict[str, tuple[str, str]]) -> Mapping[str, TribunalInfo]:
    return MappingProxyType({
        code: TribunalInfo(name=name, system=system, process_type=process_type)
        for code, (name, system) in rows.items()
    })


_STATE = _courts("civel", {
    "01": ("Tribunal de Justiça do Acre", "ESAJ"),
    "02": ("Tribunal de Justiça de Alagoas", "ESAJ"),
    "03": ("Tribunal de Justiça do Amapá", "PJe"),
    "04": ("Tribunal de Justiça do Amazonas", "ESAJ"),
    "05": ("Tribunal de Justiça da Bahia", "Projudi"),
    "06": ("Tribunal de Justiça do Ceará", "ESAJ"),
    "07": ("Tribunal de Justiça do Distrito Federal e Territórios", "PJe"),
    "08": ("Tribunal de Justiça do Espírito Santo", "PJe"),
    "09": ("Tribunal de Justiça do Paraná", "Projudi"),
    "10": ("Tribunal de Justiça do Maranhão", "PJe"),
    "11": ("Tribunal de Justiça do Mato Grosso", "PJe"),
    "12": ("Tribunal de Justiça de Goiás", "Projudi"),
    "13": ("Tribunal de Justiça de Minas Gerais", "PJe"),
    "14": ("Tribunal de Justiça do Mato Grosso do Sul", "ESAJ"),
    "15": ("Tribunal de Justiça da Paraíba", "PJe"),
    "16": ("Tribunal de Justiça do Pará", "PJe"),
    "17": ("Tribunal de Justiça de Pernambuco", "PJe"),
    "18": ("Tribunal de Justiça do Piauí", "PJe"),
    "19": ("Tribunal de Justiça do Rio de Janeiro", "TJRJ Eletrônico"),
    "20": ("Tribunal de Justiça de Rondônia", "PJe"),
    "21": ("Tribunal de Justiça do Rio Grande do Sul", "eProc"),
    "22": ("Tribunal de Justiça de Roraima", "Projudi"),
    "23": ("Tribunal de Justiça de Santa Catarina", "eProc"),
    "24": ("Tribunal de Justiça de Sergipe", "Portal do Adv"),
    "26": ("Tribunal de Justiça de São Paulo", "ESAJ"),
    "27": ("Tribunal de Justiça de Tocantins", "eProc"),
})

_FEDERAL = _courts("civel", {
    f"{n:02d}": (f"Tribunal Regional Federal da {n}ª Região", "PJe") for n in range(1, 7)
})

_TRT_STATES = (
    "RJ", "SP", "MG", "RS", "BA", "PE", "CE", "PA", "PR", "DF", "AM", "SC",
    "PB", "RO", "SP", "MA", "ES", "GO", "AL", "SE", "RN", "PI", "MT", "MS",
)

_LABOR = _courts("trabalhista", {
    f"{n:02d}": (f"Tribunal Regional do Trabalho da {n}ª Região ({uf})", "PJe")
    for n, uf in enumerate(_TRT_STATES, start=1)
})

_SUPERIOR = MappingProxyType({
    "00": TribunalInfo(name="Supremo Tribunal Federal", system="PJe", process_type="civel"),
    "01": TribunalInfo(name="Superior Tribunal de Justiça", system="PJe", process_type="civel"),
    "02": TribunalInfo(name="Tribunal Superior do Trabalho", system="PJe", process_type="trabalhista"),
    "03": TribunalInfo(name="Superior Tribunal Militar", system="PJe", process_type="civel"),
    "04": TribunalInfo(name="Tribunal Superior Eleitoral", system="PJe", process_type="civel"),
})

_ELECTORAL = _courts("civel", {
    "01": ("Tribunal Regional Eleitoral do Acre", "PJe"),
    "02": ("Tribunal Regional Eleitoral de Alagoas", "PJe"),
    "03": ("Tribunal Regional Eleitoral do Amapá", "PJe"),
    "04": ("Tribunal Regional Eleitoral do Amazonas", "PJe"),
    "05": ("Tribunal Regional Eleitoral da Bahia", "PJe"),
    "06": ("Tribunal Regional Eleitoral do Ceará", "PJe"),
    "07": ("Tribunal Regional Eleitoral do Distrito Federal", "PJe"),
    "08": ("Tribunal Regional Eleitoral do Espírito Santo", "PJe"),
    "09": ("Tribunal Regional Eleitoral de Goiás", "PJe"),
    "10": ("Tribunal Regional Eleitoral do Maranhão", "PJe"),
    "11": ("Tribunal Regional Eleitoral do Mato Grosso", "PJe"),
    "12": ("Tribunal Regional Eleitoral do Mato Grosso do Sul", "PJe"),
    "13": ("Tribunal Regional Eleitoral de Minas Gerais", "PJe"),
    "14": ("Tribunal Regional Eleitoral do Pará", "PJe"),
    "15": ("Tribunal Regional Eleitoral da Paraíba", "PJe"),
    "16": ("Tribunal Regional Eleitoral do Paraná", "PJe"),
    "17": ("Tribunal Regional Eleitoral de Pernambuco", "PJe"),
    "18": ("Tribunal Regional Eleitoral do Piauí", "PJe"),
    "19": ("Tribunal Regional Eleitoral do Rio de Janeiro", "PJe"),
    "20": ("Tribunal Regional Eleitoral do Rio Grande do Norte", "PJe"),
    "21": ("Tribunal Regional Eleitoral do Rio Grande do Sul", "PJe"),
    "22": ("Tribunal Regional Eleitoral de Rondônia", "PJe"),
    "23": ("Tribunal Regional Eleitoral de Roraima", "PJe"),
    "24": ("Tribunal Regional Eleitoral de Santa Catarina", "PJe"),
    "25": ("Tribunal Regional Eleitoral de São Paulo", "PJe"),
    "26": ("Tribunal Regional Eleitoral de Sergipe", "PJe"),
    "27": ("Tribunal Regional Eleitoral de Tocantins", "PJe"),
})

_MILITARY = _courts("civel", {
    "01": ("Tribunal de Justiça Militar do Estado de Minas Gerais", "PJe"),
    "02": ("Tribunal de Justiça Militar do Estado do Rio Grande do Sul", "PJe"),
    "03": ("Tribunal de Justiça Militar do Estado de São Paulo", "PJe"),
})

CNJ_MAPPING: Mapping[str, Mapping[str, TribunalInfo]] = MappingProxyType({
    "1": _SUPERIOR,
    "2": _MILITARY,
    "3": _ELECTORAL,
    "4": _FEDERAL,
    "5": _LABOR,
    "8": _STATE,
})


def lookup_court(branch: str, court_code: str) -> TribunalInfo | None:
    """Base table entry for a (J, TR) pair, or ``None`` if unknown."""
    return CNJ_MAPPING.get(branch, {}).get(court_code)


_STATE_COURTS: tuple[str, ...] = (
    "Tribunal de Justiça do Acre",
    "Tribunal de Justiça de Alagoas",
    "Tribunal de Justiça do Amapá",
    "Tribunal de Justiça do Amazonas",
    "Tribunal de Justiça da Bahia",
    "Tribunal de Justiça do Ceará",
    "Tribunal de Justiça do Distrito Federal e Territórios",
    "Tribunal de Justiça do Espírito Santo",
    "Tribunal de Justiça de Goiás",
    "Tribunal de Justiça do Maranhão",
    "Tribunal de Justiça do Mato Grosso",
    "Tribunal de Justiça do Mato Grosso do Sul",
    "Tribunal de Justiça de Minas Gerais",
    "Tribunal de Justiça do Pará",
    "Tribunal de Justiça da Paraíba",
    "Tribunal de Justiça do Paraná",
    "Tribunal de Justiça de Pernambuco",
    "Tribunal de Justiça do Piauí",
    "Tribunal de Justiça do Rio de Janeiro",
    "Tribunal de Justiça do Rio Grande do Norte",
    "Tribunal de Justiça do Rio Grande do Sul",
    "Tribunal de Justiça de Rondônia",
    "Tribunal de Justiça de Roraima",
    "Tribunal de Justiça de Santa Catarina",
    "Tribunal de Justiça de São Paulo",
    "Tribunal de Justiça de Sergipe",
    "Tribunal de Justiça de Tocantins",
)

# Dropdown order groups courts by kind, not by CNJ code.  The state list
# also offers TJRN, which has no CNJ table entry and is only picked by hand.
COURTS: tuple[str, ...] = (
    *(info.name for info in _SUPERIOR.values()),
    *(info.name for info in _FEDERAL.values()),
    *_STATE_COURTS,
    *(info.name for info in _LABOR.values()),
    *(info.name for info in _ELECTORAL.values()),
    *(info.name for info in _MILITARY.values()),
)

PETITION_TYPES: tuple[str, ...] = (
    "Manifestação",
    "Contestação",
    "Tréplica",
    "Recurso de Apelação",
    "Recurso Especial",
    "Recurso Extraordinário",
    "Agravo de Instrumento",
    "Embargos de Declaração",
    "Petição Inicial",
    "Reconvenção",
    "Impugnação",
    "Alegações Finais",
    "Memoriais",
    "Petição Avulsa",
    "Cumprimento de Sentença",
    "Execução",
    "Outros",
)

PROCURATION_TYPES: tuple[str, ...] = (
    "Grupo Santander - Aymore/Santander/Santander leasing",
    "Grupo Votorantim - Banco Votorantim/BV",
    "Grupo Safra - Safra/J Safra/Safra crédito",
    "Associação Petrobras de Saúde - APS",
    "Petróleo Brasileiro - Petrobras",
    "Fundação São Francisco Xavier - FSFX",
    "Banco Pan",
    "Banco BRB",
    "Banco ITAÚ",
    "Superdigital",
    "UNIMED",
    "Previdência Usiminas",
    "Sankyu",
    "Aperam América",
    "Aperam Bioenergia",
    "Consul",
    "Outros (especificar)",
)

PROCESS_TYPES: Mapping[str, str] = MappingProxyType({
    "civel": "Cível",
    "trabalhista": "Trabalhista",
})
