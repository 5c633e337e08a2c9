"""Builders for canned NVD API response bodies."""

import json
from typing import Any


def make_item(
    cve_id: str = "CVE-2021-34527",
    descriptions: list[str] | None = None,
    published: str = "2021-07-02T00:00Z",
    cvss: dict[str, Any] | None = None,
) -> dict[str, Any]:
    if descriptions is None:
        descriptions = ["PrintNightmare"]
    item: dict[str, Any] = {
        "cve": {
            "CVE_data_meta": {"ID": cve_id},
            "description": {"description_data": [{"value": d} for d in descriptions]},
        },
        "publishedDate": published,
    }
    if cvss is not None:
        item["impact"] = {"baseMetricV3": {"cvssV3": cvss}}
    return item


def make_body(items: list[dict[str, Any]]) -> bytes:
    return json.dumps({"result": {"CVE_Items": items}}).encode()

