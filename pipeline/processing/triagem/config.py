"""Runtime configuration, read from ``TRIAGEM_*`` environment variables."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_FALLBACK_HANDLER = "Carlos"

# Manual handler that receives everything the robot cannot take.
# In production, set TRIAGEM_FALLBACK_HANDLER as an environment variable.
FALLBACK_HANDLER: str = (
    os.environ.get("TRIAGEM_FALLBACK_HANDLER", "").strip() or DEFAULT_FALLBACK_HANDLER
)

# Named manual queues a protocol's ``assigned_to`` may hold.
MANUAL_HANDLERS: frozenset[str] = frozenset({"Manual", "Deyse", "Enzo", "Iago", FALLBACK_HANDLER})

DATA_DIR: Path = Path(os.environ.get("TRIAGEM_DATA_DIR", "pipeline/data"))
