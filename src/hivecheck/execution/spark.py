"""Execute SQL on an existing SparkSession.

Note: This module requires pyspark. Install with: pip install hivecheck[spark]
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pyspark.errors import PySparkException

from hivecheck.exceptions import QueryExecutionError

if TYPE_CHECKING:
    from pyspark.sql import SparkSession


class SparkSqlExecutor:
    """Runs statements with ``spark.sql`` and renders rows as csv2 text."""

    NULL_TEXT = "NULL"

    def __init__(self, spark: SparkSession) -> None:
        """Initialize the executor with a Spark session.

        Args:
            spark: SparkSession with access to the Hive metastore

        """
        self.spark = spark
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, sql: str, options: Sequence[str] | None = None) -> str:
        """Run a statement and return its result as csv2 text with a header.

        Args:
            sql: Statement to run
            options: beeline-specific flags; accepted and ignored

        Returns:
            Header row followed by one line per result row

        Raises:
            QueryExecutionError: If Spark rejects or fails the statement

        """
        if options:
            self.logger.debug(f"Ignoring beeline options for Spark: {list(options)}")
        self.logger.debug(f"Running on Spark: {sql}")

        try:
            df = self.spark.sql(sql)
            rows = df.collect()
        except PySparkException as e:
            raise QueryExecutionError(str(e), sql=sql) from e

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(df.columns)
        for row in rows:
            writer.writerow(
                [self.NULL_TEXT if value is None else str(value) for value in row]
            )
        return buffer.getvalue()


__all__ = ["SparkSqlExecutor"]
