"""Protocolo (court filing request) — Pydantic schemas."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, model_validator

from models.base import BaseSchema, FrozenSchema, TimestampedSchema

ProtocolStatus = Literal["Aguardando", "Em Execução", "Peticionado", "Devolvido", "Cancelado"]
Jurisdiction = Literal["1º Grau", "2º Grau"]
ActivityAction = Literal["created", "moved_to_queue", "status_changed", "returned", "resubmitted"]

PENDING_STATUSES: frozenset[str] = frozenset({"Aguardando", "Em Execução"})

# Payment slip ("guia") number formats per filing system
_GUIA_FORMATS: dict[str, re.Pattern[str]] = {
    "ESAJ": re.compile(r"^\d{15}-\d{4}$"),
    "TJRJ Eletrônico": re.compile(r"^\d{11}-\d{2}$"),
}


class GuiaSchema(BaseSchema):
    number: str
    system: Literal["ESAJ", "TJRJ Eletrônico"]

    @model_validator(mode="after")
    def _check_number_format(self) -> GuiaSchema:
        if not _GUIA_FORMATS[self.system].match(self.number):
            raise ValueError(f"invalid {self.system} guia number: {self.number!r}")
        return self


class ActivityEntry(FrozenSchema):
    """One line of a protocol's activity log."""

    action: ActivityAction
    description: str
    timestamp: datetime
    performed_by: Optional[str] = None
    details: Optional[str] = None


class ProtocolForm(BaseSchema):
    """The operator-entered fields the queue router reads.

    Empty strings stand for "not filled in yet"; the router accepts a
    partially completed form.
    """

    process_number: str = ""
    court: str = ""
    system: str = ""
    jurisdiction: Literal["", "1º Grau", "2º Grau"] = ""
    process_type: Literal["", "civel", "trabalhista"] = ""
    is_fatal: bool = False
    is_distribution: bool = False
    observations: str = ""


class ProtocolCreateSchema(ProtocolForm):
    """Protocol ready to be handed to the persistence layer."""

    petition_type: str = ""
    needs_procuration: bool = False
    procuration_type: Optional[str] = None
    needs_guia: bool = False
    guias: list[GuiaSchema] = Field(default_factory=list)
    task_code: str = ""
    created_by: Optional[int] = None
    status: ProtocolStatus = "Aguardando"
    assigned_to: Optional[str] = None


class ProtocolSchema(ProtocolCreateSchema, TimestampedSchema):
    """Persisted protocol (includes id, timestamps and activity log)."""

    id: str
    return_reason: Optional[str] = None
    activity_log: list[ActivityEntry] = Field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES
