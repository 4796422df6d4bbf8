"""Document version counter."""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from config.defaults import INITIAL_VERSION

logger = logging.getLogger(__name__)

VERSION_STEP = Decimal("0.1")


def next_version(current: str | None) -> str:
    """
    Advance a decimal version string by one step.

    Uses fixed-point arithmetic so repeated saves produce 1.1, 1.2, ...
    rather than accumulating float error.

    Args:
        current: Current version, or None for a document never saved

    Returns:
        The next version formatted with one decimal place
    """
    if not current:
        return INITIAL_VERSION

    try:
        value = Decimal(str(current).strip())
    except InvalidOperation:
        logger.warning("Unparseable document version %r, restarting at %s", current, INITIAL_VERSION)
        return INITIAL_VERSION

    if not value.is_finite():
        logger.warning("Non-finite document version %r, restarting at %s", current, INITIAL_VERSION)
        return INITIAL_VERSION

    return str((value + VERSION_STEP).quantize(VERSION_STEP, rounding=ROUND_HALF_UP))
