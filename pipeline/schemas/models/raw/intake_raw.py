"""Raw JSON models for protocol submissions coming from the intake form."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = [
    "GuiaRaw",
    "ProtocolIntakeRaw",
]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuiaRaw(_CamelModel):
    number: str
    system: str


class ProtocolIntakeRaw(_CamelModel):
    type: Literal["protocolo"] = "protocolo"
    process_number: str = ""
    court: str = ""
    system: str = ""
    jurisdiction: Literal["", "1º Grau", "2º Grau"] = ""
    process_type: Literal["", "civel", "trabalhista"] = ""
    is_fatal: bool = False
    needs_procuration: bool = False
    procuration_type: Optional[str] = None
    needs_guia: bool = False
    guias: list[GuiaRaw] = []
    petition_type: str = ""
    observations: Optional[str] = None
    is_distribution: bool = False
    is_resubmission: bool = False
    task_code: str = ""
    created_by: Optional[int] = None
