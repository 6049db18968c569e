"""CNJ process-number parsing, court lookup and vocabulary."""

from triagem.cnj.mapping import (
    BRANCH_NAMES,
    CNJ_MAPPING,
    COURTS,
    PETITION_TYPES,
    PROCESS_TYPES,
    PROCURATION_TYPES,
    TRIBUNAL_SYSTEMS,
    UNIDENTIFIED_SYSTEM,
    lookup_court,
)
from triagem.cnj.overrides import STATE_SYSTEM_RULES, resolve_state_system
from triagem.cnj.parser import (
    Classification,
    CnjNumber,
    classify_cnj,
    clean_cnj,
    compute_check_digits,
    extract_tribunal_info,
    format_cnj,
    has_valid_check_digits,
    is_valid_cnj_format,
    parse_cnj,
)

__all__ = [
    # Table and vocabulary
    "BRANCH_NAMES",
    "CNJ_MAPPING",
    "COURTS",
    "PETITION_TYPES",
    "PROCESS_TYPES",
    "PROCURATION_TYPES",
    "TRIBUNAL_SYSTEMS",
    "UNIDENTIFIED_SYSTEM",
    "lookup_court",
    # Overrides
    "STATE_SYSTEM_RULES",
    "resolve_state_system",
    # Parser
    "Classification",
    "CnjNumber",
    "classify_cnj",
    "clean_cnj",
    "compute_check_digits",
    "extract_tribunal_info",
    "format_cnj",
    "has_valid_check_digits",
    "is_valid_cnj_format",
    "parse_cnj",
]
