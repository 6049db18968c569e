"""Validators — data quality checks before protocols are handed off."""

from triagem.validators.data_quality import (
    DataQualityValidator,
    RejectedRecord,
    ValidationResult,
    ValidationStats,
)

__all__ = [
    "DataQualityValidator",
    "RejectedRecord",
    "ValidationResult",
    "ValidationStats",
]
