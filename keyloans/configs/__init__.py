#!/usr/bin/env python

"""
    Configurations for keyloans

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import os
from zoneinfo import ZoneInfo


DEBUG = bool(int(os.environ.get('KEYLOANS_DEBUG', 0)))
LOG_LEVEL = os.environ.get('KEYLOANS_LOG_LEVEL', 'debug' if DEBUG else 'info')

# Naive timestamps coming from the backend are read in this zone
TIMEZONE_NAME = os.environ.get('KEYLOANS_TIMEZONE', 'UTC')
TIMEZONE = ZoneInfo(TIMEZONE_NAME)

# Key names are collated in this locale
COLLATION_LOCALE = os.environ.get('KEYLOANS_LOCALE', 'sv_SE.UTF-8')

# Group keys for items without a holder / without any returned loan
UNKNOWN_HOLDER = os.environ.get('KEYLOANS_UNKNOWN_HOLDER', 'unknown')
NEVER_LOANED = os.environ.get('KEYLOANS_NEVER_LOANED', 'never-loaned')
NO_RENTAL_OBJECT = '__no_object__'

# Rank given to item types outside the priority table
OTHER_TYPE_RANK = 999

__all__ = [
    'DEBUG', 'LOG_LEVEL', 'TIMEZONE', 'TIMEZONE_NAME', 'COLLATION_LOCALE',
    'UNKNOWN_HOLDER', 'NEVER_LOANED', 'NO_RENTAL_OBJECT', 'OTHER_TYPE_RANK',
]
