"""Query executors.

Spark-dependent components (SparkSqlExecutor) require installing hivecheck[spark]:
    pip install hivecheck[spark]
"""

from hivecheck.execution.base import QueryExecutor
from hivecheck.execution.beeline import BeelineExecutor
from hivecheck.execution.results import (
    CSV2_FLAG,
    extract_int,
    extract_scalar,
    parse_tabular,
)

__all__ = [
    "CSV2_FLAG",
    "BeelineExecutor",
    "QueryExecutor",
    "extract_int",
    "extract_scalar",
    "parse_tabular",
]

# SparkSqlExecutor is available only if pyspark is installed
try:
    from hivecheck.execution.spark import SparkSqlExecutor  # noqa: F401

    __all__.append("SparkSqlExecutor")
except ImportError:
    # pyspark not available - SparkSqlExecutor won't be exported
    pass
