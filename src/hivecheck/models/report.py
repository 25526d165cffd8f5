"""Result models for profiling and duplicate checks.

Type-safe models for the output of hivecheck operations, with YAML and JSON
serialization for handing reports to other tools.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class MetricRecord(BaseModel):
    """One unpivoted profiling metric."""

    metric_name: str = Field(
        description="Metric key, e.g. min_<col>, max_length_<col>, null_<col>_pct"
    )
    metric_value: str = Field(description="Metric value as returned by the engine")

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[str, str]:
        return (self.metric_name, self.metric_value)


class ProfileReport(BaseModel):
    """Outcome of profiling a table."""

    table: str = Field(description="Profiled table (lower-cased, schema-qualified)")
    row_limit: int | None = Field(
        default=None,
        gt=1,
        description="Effective LIMIT of the scan, None for full scan",
    )
    columns: list[str] = Field(description="Profiled columns in schema order")
    excluded: str | None = Field(
        default=None, description="Exclusion substring applied to the column list"
    )
    sql: str = Field(description="Generated profiling statement")
    profiled_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the profiling query completed",
    )
    metrics: list[MetricRecord] = Field(
        default_factory=list, description="Metric rows in engine order"
    )

    model_config = ConfigDict(extra="forbid")

    def get_metric(self, metric_name: str) -> str | None:
        """Return the value of the first metric called ``metric_name``."""
        for record in self.metrics:
            if record.metric_name == metric_name:
                return record.metric_value
        return None


class DuplicateReport(BaseModel):
    """Outcome of a duplicate-row check."""

    table: str = Field(description="Checked table (lower-cased, schema-qualified)")
    columns: list[str] = Field(
        min_length=1, description="Columns that define a duplicate"
    )
    sql: str = Field(description="Generated duplicate-count statement")
    duplicate_count: int = Field(
        ge=0, description="Rows beyond the first within each duplicate group"
    )
    checked_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the duplicate query completed",
    )

    model_config = ConfigDict(extra="forbid")


def save_report_to_yaml(
    report: ProfileReport | DuplicateReport, yaml_path: str | Path
) -> None:
    """Save a report to a YAML file.

    Args:
        report: Report to save
        yaml_path: Output YAML file path

    """
    yaml_file = Path(yaml_path)
    yaml_file.parent.mkdir(parents=True, exist_ok=True)

    data = report.model_dump(mode="json")

    with yaml_file.open("w", encoding="utf-8") as f:
        yaml.dump(
            data, f, default_flow_style=False, allow_unicode=True, sort_keys=False
        )


def save_report_to_json(
    report: ProfileReport | DuplicateReport, json_path: str | Path
) -> None:
    """Save a report to a JSON file."""
    json_file = Path(json_path)
    json_file.parent.mkdir(parents=True, exist_ok=True)
    json_file.write_text(report.model_dump_json(indent=2), encoding="utf-8")


def load_profile_report_from_yaml(yaml_path: str | Path) -> ProfileReport:
    """Load and validate a ProfileReport from a YAML file.

    Args:
        yaml_path: Path to a report written by save_report_to_yaml

    Returns:
        Validated ProfileReport

    Raises:
        ValidationError: If the file content is not a valid report
        FileNotFoundError: If file doesn't exist

    """
    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        msg = f"Report file not found: {yaml_file}"
        raise FileNotFoundError(msg)

    with yaml_file.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return ProfileReport(**data)


__all__ = [
    "DuplicateReport",
    "MetricRecord",
    "ProfileReport",
    "load_profile_report_from_yaml",
    "save_report_to_json",
    "save_report_to_yaml",
]
