import functools
import locale
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from keyloans.configs import COLLATION_LOCALE, LOG_LEVEL, TIMEZONE
from keyloans.schemas.base import to_instant

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Routes keyloans records to stderr; meant for scripts and tests,
    applications embedding the package configure logging themselves."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logger.debug(f"Logging level set to: {level}")


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Aware 'now'; a naive value is read in the configured timezone."""
    if now is None:
        return datetime.now(timezone.utc)
    return to_instant(now)


def format_date(value: Optional[datetime]) -> Optional[str]:
    """DD/MM/YYYY, as printed on badges and receipts."""
    if value is None:
        return None
    return value.astimezone(TIMEZONE).strftime("%d/%m/%Y")


@functools.lru_cache(maxsize=None)
def _collator() -> Callable[[str], Any]:
    # LC_COLLATE is process wide; it is set once, on first use
    try:
        locale.setlocale(locale.LC_COLLATE, COLLATION_LOCALE)
    except locale.Error:
        logger.warning(f"Locale {COLLATION_LOCALE} is not installed, names sort by code point")
        return str
    logger.debug(f"Collating names in {COLLATION_LOCALE}")
    return locale.strxfrm


def collation_key(name: Optional[str]) -> Any:
    """Sort key for a display name in the configured locale, so that
    'b' < 'C' and, in Swedish, 'Z' < 'Å' < 'Ä' < 'Ö'."""
    return _collator()(name or "")


def has_locale_collation() -> bool:
    return _collator() is not str
