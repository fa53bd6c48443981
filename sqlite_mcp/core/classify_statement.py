"""Statement Classifier — lexical first-keyword classification of SQL text.

Invariants:
    - PURE: no IO, no state, recomputed on every call (never cached)
    - Comparison runs on an uppercased copy; callers execute the original text
    - SELECT... → READ, CREATE TABLE... → CREATE_TABLE, anything else → WRITE

Design Decisions:
    - Lexical, not a parser: comments before the keyword, nested SELECTs inside
      writes and semicolon-separated statements are not detected here.
      SQLite refuses more than one statement per execute call, so stacked
      statements fail at the gateway as DatabaseError.
    - Any whitespace run between CREATE and TABLE is accepted ("CREATE\\nTABLE")
"""

import re

from sqlite_mcp.core.domain_types import SqlText, StatementKind

_CREATE_TABLE = re.compile(r"CREATE\s+TABLE\b")


def normalize_sql(sql: str) -> SqlText:
    """Strip surrounding whitespace. Case is preserved."""
    return SqlText(sql.strip())


def classify_statement(sql: str) -> StatementKind:
    """Classify SQL text by its leading keyword(s)."""
    upper = normalize_sql(sql).upper()
    if upper.startswith("SELECT"):
        return StatementKind.READ
    if _CREATE_TABLE.match(upper):
        return StatementKind.CREATE_TABLE
    return StatementKind.WRITE


def sql_prefix(sql: str, length: int = 40) -> str:
    """Leading fragment of the statement for diagnostics."""
    text = normalize_sql(sql)
    if len(text) <= length:
        return text
    return text[:length] + "..."
