"""Protocol triage — CNJ process-number classification and queue routing.

Public entry points::

    is_valid_cnj_format(value) -> bool
    extract_tribunal_info(value) -> TribunalInfo | None
    determine_queue_assignment(form, is_distribution) -> "robot" | handler
    check_robot_eligibility(system, court) -> bool
"""

from triagem.cnj import extract_tribunal_info, is_valid_cnj_format
from triagem.routing import check_robot_eligibility, determine_queue_assignment

__all__ = [
    "check_robot_eligibility",
    "determine_queue_assignment",
    "extract_tribunal_info",
    "is_valid_cnj_format",
]
