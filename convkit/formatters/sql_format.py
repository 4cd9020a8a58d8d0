"""SQL formatting via sqlparse."""

import sqlparse

from convkit.errors import ConversionError, PreconditionError
from convkit.utils.config import settings
from convkit.utils.logger import get_logger

log = get_logger(__name__)

NO_SQL_MESSAGE = "No SQL query provided"
FORMAT_FAILED_MESSAGE = "Failed to format the SQL query. Please check the query."


def format_sql(
    sql: str,
    indent_width: int | None = None,
    lines_between_queries: int | None = None,
) -> str:
    """Re-indent *sql* with upper-case keywords, one statement per block."""
    if not sql or not sql.strip():
        raise PreconditionError(NO_SQL_MESSAGE)

    width = indent_width or settings.sql_indent_width
    gap = settings.sql_lines_between_queries if lines_between_queries is None else lines_between_queries
    try:
        statements = [
            sqlparse.format(stmt, reindent=True, keyword_case="upper", indent_width=width).strip()
            for stmt in sqlparse.split(sql)
        ]
    except Exception as exc:
        log.exception("Error formatting SQL")
        raise ConversionError(FORMAT_FAILED_MESSAGE) from exc

    return ("\n" * (gap + 1)).join(stmt for stmt in statements if stmt)
