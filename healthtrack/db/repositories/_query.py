"""
Query helpers shared by the record repositories.
"""

from typing import Any, TypeVar

from sqlalchemy import func
from sqlmodel import Session, select
from sqlmodel.sql.expression import SelectOfScalar

from healthtrack.schemas.common import DateRange, PageParams

T = TypeVar("T")


def apply_date_range(statement: SelectOfScalar[T], column: Any, date_range: DateRange) -> SelectOfScalar[T]:
    """Restrict *statement* to rows whose *column* falls inside *date_range* (inclusive)."""
    if date_range.start is not None:
        statement = statement.where(column >= date_range.start)
    if date_range.end is not None:
        statement = statement.where(column <= date_range.end)
    return statement


def paginate(session: Session, statement: SelectOfScalar[T], params: PageParams) -> tuple[list[T], int]:
    """Run *statement* for one page and count all matching rows.

    Returns:
        Tuple of (rows on the requested page, total matching rows).
    """
    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    total = session.exec(count_statement).one()
    rows = session.exec(statement.offset(params.offset).limit(params.limit)).all()
    return list(rows), total
