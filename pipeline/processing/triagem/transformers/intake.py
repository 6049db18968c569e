"""Intake transformer — raw form submissions to classified, routed protocols."""

from __future__ import annotations

import logging
from typing import Iterator

from pydantic import ValidationError

from models.protocolo import GuiaSchema, ProtocolCreateSchema
from models.raw.intake_raw import ProtocolIntakeRaw

from triagem.cnj import classify_cnj
from triagem.routing import route_protocol
from triagem.transformers.base import BaseTransformer, TransformResult

logger = logging.getLogger(__name__)

_HANDLED_TYPES = {"protocolo"}


class IntakeTransformer(BaseTransformer):
    """Classify and route raw protocol submissions."""

    source_name: str = "intake"

    def __init__(self, fallback_handler: str | None = None) -> None:
        self.fallback_handler = fallback_handler

    def transform(self, raw_records: Iterator[dict]) -> TransformResult:
        result = TransformResult()

        for record in raw_records:
            record_type = record.get("type", "protocolo")

            if record_type not in _HANDLED_TYPES:
                logger.debug("intake: unknown record type %r, skipping", record_type)
                continue

            try:
                self._transform_protocolo(record, result)
            except ValidationError as exc:
                logger.warning("intake: error transforming protocolo record: %s", exc)
                result.add_error(record, str(exc), self.source_name)

        logger.info(
            "intake: %d entities, %d unclassified, %d errors",
            result.total_entities,
            len(result.unclassified),
            len(result.errors),
        )
        return result

    # ------------------------------------------------------------------ #
    # Per-type transformers                                                #
    # ------------------------------------------------------------------ #

    def _transform_protocolo(self, record: dict, result: TransformResult) -> None:
        raw = ProtocolIntakeRaw.model_validate(record)

        protocol = ProtocolCreateSchema(
            process_number=raw.process_number,
            court=raw.court,
            system=raw.system,
            jurisdiction=raw.jurisdiction,
            process_type=raw.process_type,
            is_fatal=raw.is_fatal,
            is_distribution=raw.is_distribution,
            observations=raw.observations or "",
            petition_type=raw.petition_type,
            needs_procuration=raw.needs_procuration,
            procuration_type=raw.procuration_type if raw.needs_procuration else None,
            needs_guia=raw.needs_guia,
            guias=[GuiaSchema.model_validate(g.model_dump()) for g in raw.guias] if raw.needs_guia else [],
            task_code=raw.task_code,
            created_by=raw.created_by,
        )

        # Operator-entered court fields stay when the number can't be classified.
        if protocol.process_number:
            classification = classify_cnj(protocol.process_number)
            if classification.info is not None:
                info = classification.info
                protocol = protocol.model_copy(
                    update={
                        "court": info.name,
                        "system": info.system,
                        "process_type": info.process_type,
                    }
                )
            else:
                logger.debug(
                    "intake: %s not classified (%s)",
                    protocol.process_number,
                    classification.failure,
                )
                result.unclassified.append(protocol.process_number)

        decision = route_protocol(
            protocol,
            raw.is_distribution,
            is_resubmission=raw.is_resubmission,
            fallback_handler=self.fallback_handler,
        )
        protocol = protocol.model_copy(update={"assigned_to": decision.assigned_to})
        result.add_entity("protocolos", protocol)
