"""Data quality validation for routed protocols before hand-off."""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from pydantic import BaseModel

from triagem import config
from triagem.cnj import COURTS, TRIBUNAL_SYSTEMS
from triagem.routing import check_robot_eligibility

logger = logging.getLogger(__name__)

# Closed vocabularies (field_name -> allowed values); empty values are skipped
_VOCABULARY_RULES: dict[str, frozenset[str]] = {
    "system": frozenset(TRIBUNAL_SYSTEMS),
    "court": frozenset(COURTS),
}

# Fields that may only hold digits when filled in
_DIGITS_ONLY_RULES: frozenset[str] = frozenset({"task_code"})

# Mandatory for regular filings; distributions may leave them blank
_REQUIRED_UNLESS_DISTRIBUTION: tuple[str, ...] = (
    "process_number",
    "court",
    "jurisdiction",
    "process_type",
    "system",
    "petition_type",
)

_DIGITS_RE = re.compile(r"^\d+$")


@dataclass
class RejectedRecord:
    """A record that failed validation, with the reason for rejection."""

    record: BaseModel
    reason: str


@dataclass
class ValidationStats:
    """Summary statistics from a validation pass."""

    total_input: int = 0
    valid_count: int = 0
    duplicate_count: int = 0
    invalid_count: int = 0


@dataclass
class ValidationResult:
    """Result of validating a batch of records."""

    valid: list[BaseModel] = field(default_factory=list)
    rejected: list[RejectedRecord] = field(default_factory=list)
    stats: ValidationStats = field(default_factory=ValidationStats)


class DataQualityValidator:
    """Validates and deduplicates routed protocols.

    Pydantic already enforces types and literals; this layer adds:
    - Deduplication (by key field or full model hash)
    - Vocabulary checks against the dropdown constants
    - Required fields for non-distribution filings
    - Queue consistency (robot only for eligible system/court pairs)

    Args:
        manual_handlers: Names a protocol may be assigned to. Defaults to
            ``config.MANUAL_HANDLERS`` read when the validator is built.
    """

    def __init__(self, manual_handlers: Iterable[str] | None = None) -> None:
        if manual_handlers is None:
            manual_handlers = config.MANUAL_HANDLERS
        self.manual_handlers: frozenset[str] = frozenset(manual_handlers)

    def validate_batch(
        self,
        records: list[BaseModel],
        dedup_key: str | None = None,
    ) -> ValidationResult:
        """Validate a batch of Pydantic models.

        Args:
            records: List of Pydantic model instances to validate.
            dedup_key: Optional field name to use for deduplication.
                       If None, deduplicates by full model JSON hash.

        Returns:
            ValidationResult with valid records, rejected records, and stats.
        """
        stats = ValidationStats(total_input=len(records))
        valid: list[BaseModel] = []
        rejected: list[RejectedRecord] = []
        seen: set[str] = set()

        for record in records:
            # --- Deduplication ---
            dup_fingerprint = self._dedup_fingerprint(record, dedup_key)
            if dup_fingerprint in seen:
                stats.duplicate_count += 1
                rejected.append(RejectedRecord(record=record, reason="duplicate"))
                continue
            seen.add(dup_fingerprint)

            # --- Field-level validation ---
            violations = self._validate_fields(record)
            if violations:
                stats.invalid_count += 1
                reason = "; ".join(violations)
                rejected.append(RejectedRecord(record=record, reason=reason))
                logger.warning("Record rejected: %s", reason)
                continue

            valid.append(record)

        stats.valid_count = len(valid)

        logger.info(
            "Validation complete: %d input, %d valid, %d duplicates, %d invalid",
            stats.total_input,
            stats.valid_count,
            stats.duplicate_count,
            stats.invalid_count,
        )

        return ValidationResult(valid=valid, rejected=rejected, stats=stats)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _dedup_fingerprint(record: BaseModel, dedup_key: str | None) -> str:
        """Compute a deduplication fingerprint for a record.

        If *dedup_key* is provided and the field is filled in on the record,
        the fingerprint is ``<model_class>:<field_value>``.  Otherwise we
        fall back to a SHA-256 of the full model JSON.
        """
        if dedup_key is not None:
            value = getattr(record, dedup_key, None)
            if value:
                return f"{record.__class__.__name__}:{value}"

        json_bytes = record.model_dump_json().encode("utf-8")
        return hashlib.sha256(json_bytes).hexdigest()

    def _validate_fields(self, record: BaseModel) -> list[str]:
        """Run protocol-specific checks on a record.

        Returns a list of human-readable violation descriptions (empty if OK).
        """
        violations: list[str] = []
        data = record.model_dump()

        for field_name, allowed in _VOCABULARY_RULES.items():
            value = data.get(field_name)
            if value and value not in allowed:
                violations.append(f"{field_name}={value!r} not in vocabulary")

        for field_name in _DIGITS_ONLY_RULES:
            value = data.get(field_name)
            if value and not _DIGITS_RE.match(value):
                violations.append(f"{field_name}={value!r} must contain only digits")

        if not data.get("is_distribution"):
            for field_name in _REQUIRED_UNLESS_DISTRIBUTION:
                if field_name in data and not data[field_name]:
                    violations.append(f"{field_name} is required")

        if "task_code" in data and not data["task_code"]:
            violations.append("task_code is required")

        if data.get("needs_procuration") and not data.get("procuration_type"):
            violations.append("procuration_type is required when needs_procuration")

        if data.get("needs_guia") and not data.get("guias"):
            violations.append("at least one guia is required when needs_guia")

        if "assigned_to" in data:
            assigned_to = data["assigned_to"]
            if assigned_to is None:
                if not check_robot_eligibility(data.get("system", ""), data.get("court", "")):
                    violations.append(
                        f"robot queue cannot take system={data.get('system')!r} "
                        f"court={data.get('court')!r}"
                    )
            elif assigned_to not in self.manual_handlers:
                violations.append(f"assigned_to={assigned_to!r} is not a known queue")

        return violations
