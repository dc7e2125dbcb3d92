"""
Diagnostics

Non-fatal conditions (an unexpected file in an album, a resize that would not
shrink anything, a date that had to come from the filesystem) are reported
through a single injectable sink instead of being raised.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]


def log_warning(message: str) -> None:
    """Default sink: forward the diagnostic to the module logger."""
    logger.warning(message)


def resolve_sink(sink: Optional[WarningSink]) -> WarningSink:
    return sink if sink is not None else log_warning
