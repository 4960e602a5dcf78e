#!/usr/bin/env python

"""
    keyloans
    ~~~~~~~~
    Loan lifecycle, pickup availability and grouping engine for
    key and key-card inventories.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

__version__ = '0.3.0'
