#!/usr/bin/env python
"""
    Bundle Schema for keyloans,
    a named set of keys that belong together ("nycklar som hör ihop").

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import json
from typing import List, Optional
from pydantic import Field, field_validator
from keyloans.schemas.base import Snapshot


class Bundle(Snapshot):

    id: str
    name: str
    key_ids: List[str] = Field([], alias="keys")
    description: Optional[str] = None

    @field_validator("key_ids", mode="before")
    @classmethod
    def dedupe(cls, value):
        # The backend stores members as a JSON encoded array
        if value is None or value == "":
            return []
        if isinstance(value, str):
            value = json.loads(value)
        return list(dict.fromkeys(str(v) for v in value))
