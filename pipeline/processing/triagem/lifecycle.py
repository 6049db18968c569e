"""Protocol lifecycle — creation, queue moves, returns, resubmission, cancel.

Every helper is pure: it takes a ``ProtocolSchema`` and returns an updated
copy with one new activity-log entry.  Persisting the copy is the caller's
job.

Status flow::

    Aguardando <-> Em Execução -> Peticionado
         |  ^          |
         v  |          v
       Devolvido ---> (resubmit) -> Aguardando
    any non-final status -> Cancelado

``Peticionado`` and ``Cancelado`` are final.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from models.protocolo import ActivityEntry, ProtocolCreateSchema, ProtocolForm, ProtocolSchema

from triagem.cnj import extract_tribunal_info
from triagem.routing import route_protocol

logger = logging.getLogger(__name__)

__all__ = [
    "FINAL_STATUSES",
    "LifecycleError",
    "ROBOT_PERFORMER",
    "autofill",
    "cancel",
    "describe_change",
    "move_to_queue",
    "new_protocol",
    "resubmit",
    "return_protocol",
    "set_status",
]

FINAL_STATUSES: frozenset[str] = frozenset({"Peticionado", "Cancelado"})

ROBOT_PERFORMER = "Robô"
SYSTEM_PERFORMER = "Sistema"
ROBOT_RETURN_QUEUE = "Manual"


class LifecycleError(ValueError):
    """An operation that the protocol's current status does not allow."""


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def _queue_name(assigned_to: str | None) -> str:
    return f"fila {assigned_to}" if assigned_to else "fila do Robô"


def describe_change(
    old_status: str,
    new_status: str,
    old_assigned_to: str | None,
    new_assigned_to: str | None,
) -> str:
    """Human-readable activity text for a status and/or queue change."""
    if new_assigned_to != old_assigned_to:
        return f"Movido da {_queue_name(old_assigned_to)} para {_queue_name(new_assigned_to)}"

    if new_status != old_status:
        return {
            "Peticionado": "Protocolo peticionado com sucesso",
            "Devolvido": "Protocolo devolvido",
            "Cancelado": "Protocolo cancelado",
            "Em Execução": "Protocolo em execução",
            "Aguardando": "Protocolo aguardando processamento",
        }.get(new_status, f"Status alterado de {old_status} para {new_status}")

    return "Protocolo atualizado"


def autofill(form: ProtocolCreateSchema) -> ProtocolCreateSchema:
    """Fill court, system and process type from the process number.

    When the number cannot be classified the operator's values are kept.
    """
    info = extract_tribunal_info(form.process_number)
    if info is None:
        return form
    return form.model_copy(
        update={"court": info.name, "system": info.system, "process_type": info.process_type}
    )


def _ensure_open(protocol: ProtocolSchema, action: str) -> None:
    if protocol.status in FINAL_STATUSES:
        raise LifecycleError(
            f"cannot {action} protocol {protocol.id}: status is {protocol.status}"
        )


def _with_entry(
    protocol: ProtocolSchema,
    entry: ActivityEntry,
    **updates: object,
) -> ProtocolSchema:
    return protocol.model_copy(
        update={
            **updates,
            "updated_at": entry.timestamp,
            "activity_log": [*protocol.activity_log, entry],
        }
    )


def new_protocol(
    form: ProtocolCreateSchema,
    *,
    is_distribution: bool | None = None,
    performed_by: str | None = None,
    protocol_id: str | None = None,
    now: datetime | None = None,
    fallback_handler: str | None = None,
) -> ProtocolSchema:
    """Classify, route and stamp a freshly submitted protocol."""
    now = now or _utcnow()
    filled = autofill(form)
    decision = route_protocol(filled, is_distribution, fallback_handler=fallback_handler)

    description = "Protocolo criado"
    if decision.assigned_to:
        description += f" e atribuído à fila {decision.assigned_to}"
    else:
        description += " na fila do Robô"

    entry = ActivityEntry(
        action="created",
        description=description,
        timestamp=now,
        performed_by=performed_by or "Usuário",
    )
    data = filled.model_dump()
    data.update(
        status="Aguardando",
        assigned_to=decision.assigned_to,
        is_distribution=filled.is_distribution if is_distribution is None else is_distribution,
    )
    return ProtocolSchema(
        **data,
        id=protocol_id or uuid.uuid4().hex,
        created_at=now,
        updated_at=now,
        activity_log=[entry],
    )


def move_to_queue(
    protocol: ProtocolSchema,
    assigned_to: str | None,
    *,
    performed_by: str | None = None,
    now: datetime | None = None,
) -> ProtocolSchema:
    """Put *protocol* back in ``Aguardando`` on the given queue (``None`` = robot)."""
    _ensure_open(protocol, "move")
    target = f"Fila do {assigned_to}" if assigned_to else "Fila do Robô"
    entry = ActivityEntry(
        action="moved_to_queue",
        description=f"Movido para: {target}",
        timestamp=now or _utcnow(),
        performed_by=performed_by or SYSTEM_PERFORMER,
        details=assigned_to,
    )
    return _with_entry(protocol, entry, status="Aguardando", assigned_to=assigned_to)


def return_protocol(
    protocol: ProtocolSchema,
    reason: str,
    *,
    performed_by: str | None = None,
    now: datetime | None = None,
) -> ProtocolSchema:
    """Send *protocol* back for correction.

    A return by the robot lands in the ``Manual`` queue and stays pending;
    a return by a person marks it ``Devolvido`` for the lawyer to fix.
    """
    _ensure_open(protocol, "return")
    timestamp = now or _utcnow()

    if performed_by == ROBOT_PERFORMER:
        entry = ActivityEntry(
            action="returned",
            description="Protocolo devolvido pelo Robô para Fila Manual",
            timestamp=timestamp,
            performed_by=performed_by,
            details=reason,
        )
        return _with_entry(
            protocol,
            entry,
            status="Aguardando",
            assigned_to=ROBOT_RETURN_QUEUE,
            return_reason=f"Devolvido pelo Robô: {reason}",
        )

    entry = ActivityEntry(
        action="returned",
        description="Protocolo devolvido",
        timestamp=timestamp,
        performed_by=performed_by or SYSTEM_PERFORMER,
        details=reason,
    )
    return _with_entry(
        protocol, entry, status="Devolvido", assigned_to=None, return_reason=reason
    )


def _previous_manual_queue(protocol: ProtocolSchema) -> Optional[str]:
    for entry in reversed(protocol.activity_log):
        if entry.action == "moved_to_queue" and entry.details:
            return entry.details
    return None


def resubmit(
    protocol: ProtocolSchema,
    changes: ProtocolForm | None = None,
    *,
    performed_by: str | None = None,
    now: datetime | None = None,
    fallback_handler: str | None = None,
) -> ProtocolSchema:
    """Send a returned protocol again, optionally with corrected fields.

    Resubmitted protocols never go to the robot: they return to the manual
    queue they were last moved to, or to the fallback handler.
    """
    if protocol.status != "Devolvido":
        raise LifecycleError(
            f"cannot resubmit protocol {protocol.id}: status is {protocol.status}"
        )

    updates: dict[str, object] = {}
    if changes is not None:
        updates = changes.model_dump(exclude_unset=True)
    edited = protocol.model_copy(update=updates)

    decision = route_protocol(edited, is_resubmission=True, fallback_handler=fallback_handler)
    assigned_to = _previous_manual_queue(protocol) or decision.assigned_to

    logger.info("lifecycle: protocol %s resubmitted to %s", protocol.id, assigned_to)
    entry = ActivityEntry(
        action="resubmitted",
        description="Protocolo editado e reenviado",
        timestamp=now or _utcnow(),
        performed_by=performed_by or "Usuário",
    )
    return _with_entry(
        edited, entry, status="Aguardando", assigned_to=assigned_to, return_reason=None
    )


def set_status(
    protocol: ProtocolSchema,
    status: str,
    *,
    performed_by: str | None = None,
    now: datetime | None = None,
) -> ProtocolSchema:
    """Change status in place on the current queue (e.g. ``Em Execução``)."""
    _ensure_open(protocol, "update")
    if status == "Devolvido":
        raise LifecycleError("use return_protocol() to return a protocol")
    if status == "Cancelado":
        return cancel(protocol, performed_by=performed_by, now=now)
    if protocol.status == "Devolvido":
        raise LifecycleError(
            f"protocol {protocol.id} was returned; use resubmit() to send it again"
        )

    entry = ActivityEntry(
        action="status_changed",
        description=describe_change(
            protocol.status, status, protocol.assigned_to, protocol.assigned_to
        ),
        timestamp=now or _utcnow(),
        performed_by=performed_by or SYSTEM_PERFORMER,
    )
    updated = _with_entry(protocol, entry, status=status)
    # model_copy skips validation; re-validate so a bad status is caught here
    return ProtocolSchema.model_validate(updated.model_dump())


def cancel(
    protocol: ProtocolSchema,
    *,
    performed_by: str | None = None,
    now: datetime | None = None,
) -> ProtocolSchema:
    _ensure_open(protocol, "cancel")
    entry = ActivityEntry(
        action="status_changed",
        description="Protocolo cancelado",
        timestamp=now or _utcnow(),
        performed_by=performed_by or SYSTEM_PERFORMER,
    )
    return _with_entry(protocol, entry, status="Cancelado")
