"""Shared fixtures: canned NVD API response bodies."""

from typing import Any

import pytest

from .helpers import make_body, make_item


@pytest.fixture
def full_cvss() -> dict[str, Any]:
    return {
        "baseScore": 8.8,
        "baseSeverity": "HIGH",
        "attackVector": "NETWORK",
        "attackComplexity": "LOW",
        "vectorString": "CVSS:3.1/AV:N/AC:L/PR:L/UI:N/S:U/C:H/I:H/A:H",
    }


@pytest.fixture
def print_nightmare_body(full_cvss: dict[str, Any]) -> bytes:
    return make_body([make_item(cvss=full_cvss)])


@pytest.fixture
def empty_body() -> bytes:
    return b'{"result":{"CVE_Items":[]}}'
