"""Response envelope models using Pydantic.

Mirrors the NVD CVE 1.0 JSON shape::

    {"result": {"CVE_Items": [{"cve": {...}, "impact": {...},
                               "publishedDate": "..."}]}}

Every nested object is optional.  A missing or ``null`` object decodes to
an empty instance whose fields keep their zero values, so a record with no
CVSS v3 block still validates.  A ``null`` element inside
``CVE_Items`` or ``description_data`` becomes an empty item.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_as_empty(v: Any) -> Any:
    """Treat an explicit JSON ``null`` object like an absent one."""
    return {} if v is None else v


def _none_as_empty_items(v: Any) -> Any:
    """Treat a ``null`` list as empty and ``null`` elements as empty objects."""
    if v is None:
        return []
    if isinstance(v, list):
        return [_none_as_empty(i) for i in v]
    return v


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class SeverityMetrics(_Model):
    """CVSS v3 scoring fields shown in the table.

    Attributes:
        base_score: Numeric base score (0.0–10.0).
        base_severity: ``LOW`` / ``MEDIUM`` / ``HIGH`` / ``CRITICAL``.
        attack_vector: e.g. ``NETWORK``.
        attack_complexity: e.g. ``LOW``.
        vector_string: Full CVSS vector, e.g. ``CVSS:3.1/AV:N/...``.
    """

    base_score: float = Field(default=0.0, alias="baseScore")
    base_severity: str = Field(default="", alias="baseSeverity")
    attack_vector: str = Field(default="", alias="attackVector")
    attack_complexity: str = Field(default="", alias="attackComplexity")
    vector_string: str = Field(default="", alias="vectorString")

    @field_validator("base_score", mode="before")
    @classmethod
    def _null_score(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @field_validator("base_severity", "attack_vector", "attack_complexity", "vector_string", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v


class BaseMetricV3(_Model):
    cvss_v3: SeverityMetrics = Field(default_factory=SeverityMetrics, alias="cvssV3")

    @field_validator("cvss_v3", mode="before")
    @classmethod
    def _null_cvss(cls, v: Any) -> Any:
        return _none_as_empty(v)


class Impact(_Model):
    # None means the record carries no v3 scoring at all.
    base_metric_v3: BaseMetricV3 | None = Field(default=None, alias="baseMetricV3")


class DescriptionEntry(_Model):
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _null_value(cls, v: Any) -> Any:
        return "" if v is None else v


class Description(_Model):
    description_data: list[DescriptionEntry] = Field(default_factory=list)

    @field_validator("description_data", mode="before")
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        return _none_as_empty_items(v)


class DataMeta(_Model):
    id: str = Field(default="", alias="ID")

    @field_validator("id", mode="before")
    @classmethod
    def _null_id(cls, v: Any) -> Any:
        return "" if v is None else v


class CveBody(_Model):
    data_meta: DataMeta = Field(default_factory=DataMeta, alias="CVE_data_meta")
    description: Description = Field(default_factory=Description)

    @field_validator("data_meta", "description", mode="before")
    @classmethod
    def _null_nested(cls, v: Any) -> Any:
        return _none_as_empty(v)


class CveItem(_Model):
    """One entry of ``result.CVE_Items``."""

    cve: CveBody = Field(default_factory=CveBody)
    impact: Impact = Field(default_factory=Impact)
    published_date: str = Field(default="", alias="publishedDate")

    @field_validator("cve", "impact", mode="before")
    @classmethod
    def _null_nested(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @field_validator("published_date", mode="before")
    @classmethod
    def _null_date(cls, v: Any) -> Any:
        return "" if v is None else v


class ResultBlock(_Model):
    cve_items: list[CveItem] = Field(default_factory=list, alias="CVE_Items")

    @field_validator("cve_items", mode="before")
    @classmethod
    def _null_items(cls, v: Any) -> Any:
        return _none_as_empty_items(v)


class ApiResponse(_Model):
    """Top-level envelope returned by the single-record lookup endpoint."""

    result: ResultBlock = Field(default_factory=ResultBlock)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, v: Any) -> Any:
        return _none_as_empty(v)
