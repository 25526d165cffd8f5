"""Profile Hive tables and count duplicate rows with generated HiveQL."""

from hivecheck.api import analyse_table, count_duplicates, list_columns
from hivecheck.config import HiveSettings, load_settings
from hivecheck.duplicates import (
    DuplicateCounter,
    build_duplicate_query,
    build_duplicate_select,
)
from hivecheck.exceptions import (
    ConnectionFailureError,
    HiveCheckError,
    InvalidArgumentsError,
    InvalidIdentifierError,
    QueryExecutionError,
    SchemaUnavailableError,
    ToolUnavailableError,
)
from hivecheck.execution import BeelineExecutor, QueryExecutor
from hivecheck.models import (
    AbsoluteLimit,
    DuplicateReport,
    FractionLimit,
    MetricRecord,
    ProfileReport,
    SampleSpec,
    TableRef,
    load_profile_report_from_yaml,
    parse_sample_spec,
    save_report_to_json,
    save_report_to_yaml,
)
from hivecheck.profiling import MetricKind, TableProfiler, build_profile_query
from hivecheck.sampling import SampleSizeResolver
from hivecheck.schema import SchemaProvider, columns_csv

__version__ = "0.1.0"

__all__ = [
    "AbsoluteLimit",
    "BeelineExecutor",
    "ConnectionFailureError",
    "DuplicateCounter",
    "DuplicateReport",
    "FractionLimit",
    "HiveCheckError",
    "HiveSettings",
    "InvalidArgumentsError",
    "InvalidIdentifierError",
    "MetricKind",
    "MetricRecord",
    "ProfileReport",
    "QueryExecutionError",
    "QueryExecutor",
    "SampleSizeResolver",
    "SampleSpec",
    "SchemaProvider",
    "SchemaUnavailableError",
    "TableProfiler",
    "TableRef",
    "ToolUnavailableError",
    "analyse_table",
    "build_duplicate_query",
    "build_duplicate_select",
    "build_profile_query",
    "columns_csv",
    "count_duplicates",
    "list_columns",
    "load_profile_report_from_yaml",
    "load_settings",
    "parse_sample_spec",
    "save_report_to_json",
    "save_report_to_yaml",
]

# SparkSqlExecutor is available only if pyspark is installed (via hivecheck[spark])
try:
    from hivecheck.execution import SparkSqlExecutor  # noqa: F401

    __all__.append("SparkSqlExecutor")
except ImportError:
    # pyspark not available - SparkSqlExecutor won't be exported
    pass
