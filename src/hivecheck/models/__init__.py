"""Data models for hivecheck."""

from hivecheck.models.report import (
    DuplicateReport,
    MetricRecord,
    ProfileReport,
    load_profile_report_from_yaml,
    save_report_to_json,
    save_report_to_yaml,
)
from hivecheck.models.sampling import (
    AbsoluteLimit,
    FractionLimit,
    SampleSpec,
    parse_sample_spec,
)
from hivecheck.models.table import TableRef

__all__ = [
    "AbsoluteLimit",
    "DuplicateReport",
    "FractionLimit",
    "MetricRecord",
    "ProfileReport",
    "SampleSpec",
    "TableRef",
    "load_profile_report_from_yaml",
    "parse_sample_spec",
    "save_report_to_json",
    "save_report_to_yaml",
]
