#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_utils
    ~~~~~~~~~~~~~~~~

    This module tests logging setup and time helpers.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import locale
import logging
from datetime import datetime, timezone

from keyloans.core import utils
from keyloans.core.utils import collation_key, format_date, resolve_now, setup_logging
from conftest import at, swedish_collation


def test_resolve_now_defaults_to_aware_utc():
    now = resolve_now()
    assert now.tzinfo is not None
    assert abs((datetime.now(timezone.utc) - now).total_seconds()) < 60


def test_resolve_now_keeps_aware_values():
    assert resolve_now(at("2024-06-15")) == at("2024-06-15")


def test_format_date():
    assert format_date(at("2024-07-01T10:00")) == "01/07/2024"
    assert format_date(None) is None


def test_setup_logging_accepts_lowercase_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    setup_logging("debug")
    assert calls["level"] == "DEBUG"


@swedish_collation
def test_collation_key_orders_swedish_letters_after_z():
    assert sorted(["Ö", "Å", "z", "Ä"], key=collation_key) == ["z", "Å", "Ä", "Ö"]


def test_collation_falls_back_to_code_point_without_locale(monkeypatch):
    def unavailable(category, name=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(utils.locale, "setlocale", unavailable)
    utils._collator.cache_clear()
    try:
        assert not utils.has_locale_collation()
        assert sorted(["b", "C"], key=collation_key) == ["C", "b"]
        assert collation_key(None) == ""
    finally:
        monkeypatch.undo()
        utils._collator.cache_clear()
