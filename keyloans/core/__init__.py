#!/usr/bin/env python

"""
    Core module for keyloans: loan state, pickup availability,
    grouping, bundle guard and receipt tracking.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""
