from __future__ import annotations

from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from core.exceptions import ConcurrencyError, NotFoundError


def update_with_version_check(
    session: Session,
    orm_type: type[Any],
    row_id: str,
    expected_version: int,
    values: dict[str, Any],
    *,
    entity: str = "Task",
) -> int:
    """
    Write ``values`` only while the row is still at ``expected_version``.

    Returns the new version. A missing row raises ``NotFoundError``
    (``<ENTITY>_NOT_FOUND``); a row bumped by another writer raises
    ``ConcurrencyError`` (``STALE_WRITE``).
    """
    next_version = int(expected_version) + 1
    result = session.execute(
        update(orm_type)
        .where(orm_type.id == row_id, orm_type.version == expected_version)
        .values(**values, version=next_version)
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount == 1:
        return next_version

    if session.get(orm_type, row_id) is None:
        raise NotFoundError(f"{entity} not found.", code=f"{entity.upper()}_NOT_FOUND")
    raise ConcurrencyError(
        f"{entity} changed since you opened it. Refresh and try again.",
        code="STALE_WRITE",
    )
