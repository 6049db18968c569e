"""Raw JSON Pydantic models — what the intake form submits."""

from models.raw.intake_raw import *  # noqa: F401, F403
