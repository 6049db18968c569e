"""Transformers — convert raw intake JSONL records into domain Pydantic schemas."""

from triagem.transformers.base import BaseTransformer, TransformError, TransformResult
from triagem.transformers.intake import IntakeTransformer

TRANSFORMER_REGISTRY: dict[str, type[BaseTransformer]] = {
    "intake": IntakeTransformer,
}

__all__ = [
    "BaseTransformer",
    "TransformResult",
    "TransformError",
    "IntakeTransformer",
    "TRANSFORMER_REGISTRY",
]
