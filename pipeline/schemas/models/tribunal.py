"""TribunalInfo — court identity derived from a CNJ process number."""

from __future__ import annotations

from typing import Literal

from models.base import FrozenSchema

ProcessType = Literal["civel", "trabalhista"]


class TribunalInfo(FrozenSchema):
    name: str
    system: str
    process_type: ProcessType
