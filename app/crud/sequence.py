"""
Bulk reordering of sequenced tables.

Admin screens let staff drag a list of plans, benefits or master values into
a new order and submit every (id, sequence) pair at once. The whole batch is
written in a single transaction: either every row gets its new position or
none does.
"""

import logging
from typing import Any, Iterable, List, NamedTuple, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class SequenceAssignment(NamedTuple):
    id: int
    sequence: Optional[int]


def _coerce_int(value: Any) -> Optional[int]:
    """
    Convert a loosely-typed JSON scalar to an int.

    Accepts ints, integral floats and numeric strings ("7", " 7 ", "7.0").
    Returns None for anything else, including booleans and non-integral numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def normalize_sequence_entries(entries: Optional[Iterable[Any]]) -> List[SequenceAssignment]:
    """
    Turn raw reorder entries into typed assignments.

    - Entries whose id is not an integer are dropped.
    - A sequence of "" clears the position (NULL); so does any value that is
      not an integer.
    - Duplicate ids collapse to their last occurrence, which also fixes the
      position of that id in the batch.

    Args:
        entries: SequenceEntry models or plain dicts; None is treated as empty

    Returns:
        Assignments in the order they will be written
    """
    assignments = {}

    for entry in entries or []:
        entry_id = _coerce_int(_field(entry, "id"))
        if entry_id is None:
            continue

        raw_sequence = _field(entry, "sequence")
        sequence = None if raw_sequence == "" else _coerce_int(raw_sequence)

        # Re-insert so the last occurrence decides the write order
        assignments.pop(entry_id, None)
        assignments[entry_id] = sequence

    return [SequenceAssignment(entry_id, sequence) for entry_id, sequence in assignments.items()]


def apply_sequence_updates(db: Session, model, entries: Optional[Iterable[Any]]) -> int:
    """
    Persist a reorder batch for one sequenced table, all-or-nothing.

    Each assignment becomes one UPDATE ... SET sequence WHERE id = :id, run
    sequentially inside the session's transaction. Any failure rolls back the
    whole batch and is re-raised to the caller.

    Args:
        db: Database session (owned by the current request)
        model: Mapped class with integer `id` and `sequence` columns
        entries: Raw reorder entries (see normalize_sequence_entries)

    Returns:
        Number of assignments attempted. Ids that match no row still count.
    """
    assignments = normalize_sequence_entries(entries)
    if not assignments:
        return 0

    table_name = model.__tablename__

    try:
        for assignment in assignments:
            values = {"sequence": assignment.sequence}
            if hasattr(model, "updated_at"):
                # Reordering is not an edit of the row; keep updated_at as is
                values["updated_at"] = model.updated_at
            stmt = (
                update(model)
                .where(model.id == assignment.id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            db.execute(stmt)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(f"Sequence update rolled back for {table_name} ({len(assignments)} rows)")
        raise

    logger.info(f"Updated sequence of {len(assignments)} rows in {table_name}")
    return len(assignments)
