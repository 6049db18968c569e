"""Triagem schemas — Pydantic validation schemas for protocols and courts."""

from models.base import BaseSchema, FrozenSchema, TimestampedSchema
from models.protocolo import (
    PENDING_STATUSES,
    ActivityEntry,
    GuiaSchema,
    ProtocolCreateSchema,
    ProtocolForm,
    ProtocolSchema,
)
from models.tribunal import TribunalInfo

__all__ = [
    "BaseSchema",
    "FrozenSchema",
    "TimestampedSchema",
    "PENDING_STATUSES",
    "ActivityEntry",
    "GuiaSchema",
    "ProtocolCreateSchema",
    "ProtocolForm",
    "ProtocolSchema",
    "TribunalInfo",
]
