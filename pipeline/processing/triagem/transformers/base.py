"""Shared pieces of the intake transformers: result container and run I/O."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class TransformError:
    """A raw record that could not become a protocol."""

    record: dict
    error: str
    source: str


@dataclass
class TransformResult:
    """Protocols produced by one run, keyed by output table.

    ``unclassified`` lists process numbers the CNJ table did not resolve;
    those protocols are still in ``entities`` with the operator's fields.
    """

    entities: dict[str, list] = field(default_factory=dict)
    unclassified: list[str] = field(default_factory=list)
    errors: list[TransformError] = field(default_factory=list)

    def add_entity(self, table: str, obj: object) -> None:
        self.entities.setdefault(table, []).append(obj)

    def add_error(self, record: dict, error: str, source: str) -> None:
        self.errors.append(TransformError(record=record, error=error, source=source))

    @property
    def total_entities(self) -> int:
        return sum(len(v) for v in self.entities.values())


class BaseTransformer(ABC):
    """Reads a dated run of raw JSONL submissions; subclasses shape them."""

    source_name: str

    def read_jsonl(self, path: Path) -> Iterator[dict]:
        """Yield one dict per non-blank line; malformed lines are logged and skipped."""
        with path.open("r", encoding="utf-8") as fh:
            for lineno, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError as exc:
                    logger.warning("%s:%d - invalid JSON, skipping: %s", path.name, lineno, exc)

    def find_latest_run(self, base_dir: Path) -> Path | None:
        """Newest ``raw/<source_name>/YYYY-MM-DD`` directory under *base_dir*."""
        source_dir = base_dir / "raw" / self.source_name
        if not source_dir.is_dir():
            logger.warning("No %s runs under %s", self.source_name, base_dir)
            return None

        runs = [d for d in source_dir.iterdir() if d.is_dir()]
        if not runs:
            logger.warning("No run directories found under %s", source_dir)
            return None
        return max(runs, key=lambda d: d.name)

    @abstractmethod
    def transform(self, raw_records: Iterator[dict]) -> TransformResult:
        """Turn raw records into protocols, recording per-record failures."""
