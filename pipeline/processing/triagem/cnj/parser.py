"""CNJ process-number parsing and court classification.

Format (Resolução CNJ 65/2008): ``NNNNNNN-DD.AAAA.J.TR.OOOO``

- NNNNNNN: sequential number
- DD: check digits
- AAAA: filing year
- J: justice branch
- TR: court code within the branch
- OOOO: origin unit

Only digits, ``.`` and ``-`` carry meaning; anything else is stripped
before matching.  A number either matches the full pattern or is rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Literal, Optional

from models.tribunal import TribunalInfo

from triagem.cnj.mapping import lookup_court
from triagem.cnj.overrides import STATE_JUSTICE_BRANCH, resolve_state_system

logger = logging.getLogger(__name__)

__all__ = [
    "Classification",
    "CnjNumber",
    "FailureReason",
    "classify_cnj",
    "clean_cnj",
    "compute_check_digits",
    "extract_tribunal_info",
    "format_cnj",
    "has_valid_check_digits",
    "is_valid_cnj_format",
    "parse_cnj",
]

_STRIP_RE = re.compile(r"[^\d.\-]")
_CNJ_RE = re.compile(r"^(\d{7})-(\d{2})\.(\d{4})\.(\d)\.(\d{2})\.(\d{4})$")
_NON_DIGIT_RE = re.compile(r"\D")

FailureReason = Literal["invalid_format", "unknown_court"]


@dataclass(frozen=True)
class CnjNumber:
    """The six fields of a well-formed CNJ number."""

    sequential: str
    check_digits: str
    year: str
    branch: str
    court_code: str
    origin: str

    @property
    def formatted(self) -> str:
        return (
            f"{self.sequential}-{self.check_digits}.{self.year}."
            f"{self.branch}.{self.court_code}.{self.origin}"
        )

    @property
    def digits(self) -> str:
        return (
            f"{self.sequential}{self.check_digits}{self.year}"
            f"{self.branch}{self.court_code}{self.origin}"
        )


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying a process number.

    ``info`` is ``None`` exactly when ``failure`` is set.
    """

    info: Optional[TribunalInfo] = None
    failure: Optional[FailureReason] = None
    number: Optional[CnjNumber] = None

    @property
    def ok(self) -> bool:
        return self.info is not None


def clean_cnj(value: str) -> str:
    """Strip every character except digits, ``.`` and ``-``."""
    return _STRIP_RE.sub("", value)


def parse_cnj(value: str) -> CnjNumber | None:
    match = _CNJ_RE.match(clean_cnj(value))
    if match is None:
        return None
    return CnjNumber(*match.groups())


def is_valid_cnj_format(value: str) -> bool:
    """True if *value*, once cleaned, is a canonical CNJ number.

    Leading zeros and check digits are not inspected.
    """
    return _CNJ_RE.match(clean_cnj(value)) is not None


def classify_cnj(value: str) -> Classification:
    """Classify a process number, telling a bad format from an unknown court."""
    cnj = parse_cnj(value)
    if cnj is None:
        logger.debug("cnj: %r is not a CNJ number", value)
        return Classification(failure="invalid_format")

    base = lookup_court(cnj.branch, cnj.court_code)
    if base is None:
        logger.debug(
            "cnj: no court for branch=%s code=%s (%s)",
            cnj.branch,
            cnj.court_code,
            cnj.formatted,
        )
        return Classification(failure="unknown_court", number=cnj)

    info = base
    if cnj.branch == STATE_JUSTICE_BRANCH:
        system = resolve_state_system(cnj, base.system)
        if system != base.system:
            info = base.model_copy(update={"system": system})

    return Classification(info=info, number=cnj)


def extract_tribunal_info(value: str) -> TribunalInfo | None:
    """Court name, filing system and case type for a process number.

    Returns ``None`` both for malformed input and for branch/court pairs
    missing from the table; callers fall back to manual entry.
    """
    return classify_cnj(value).info


def format_cnj(value: str) -> str | None:
    """Mask a 20-digit process number as ``NNNNNNN-DD.AAAA.J.TR.OOOO``.

    Punctuation in *value* is ignored; returns ``None`` unless exactly 20
    digits remain.
    """
    digits = _NON_DIGIT_RE.sub("", value)
    if len(digits) != 20:
        return None
    return (
        f"{digits[:7]}-{digits[7:9]}.{digits[9:13]}."
        f"{digits[13]}.{digits[14:16]}.{digits[16:]}"
    )


def compute_check_digits(cnj: CnjNumber) -> str:
    """Expected DD for *cnj* (ISO 7064 mod 97-10, as CNJ prescribes)."""
    base = f"{cnj.sequential}{cnj.year}{cnj.branch}{cnj.court_code}{cnj.origin}00"
    return f"{98 - int(base) % 97:02d}"


def has_valid_check_digits(value: str) -> bool:
    """True if *value* is well formed and its check digits are correct.

    Classification never calls this: numbers with wrong check digits are
    still classified.
    """
    cnj = parse_cnj(value)
    if cnj is None:
        return False
    return compute_check_digits(cnj) == cnj.check_digits
