"""
CRUD operations shared by every sequenced table.

Plans, plan benefits and master values all carry id / sequence / is_active
columns and most of them are soft-deleted, so the same handful of queries
serves all of them. The model class is passed in explicitly.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Query, Session


def is_soft_deletable(model) -> bool:
    return hasattr(model, "deleted_at")


def live(query: Query, model) -> Query:
    """Exclude soft-deleted rows"""
    if is_soft_deletable(model):
        query = query.filter(model.deleted_at.is_(None))
    return query


def order_by_column(query: Query, model, column, descending: bool = False) -> Query:
    """
    Sort by column with NULLs last in either direction, ties broken by id ascending.
    """
    direction = column.desc() if descending else column.asc()
    return query.order_by(column.is_(None), direction, model.id.asc())


def get_by_id(db: Session, model, item_id: int) -> Optional[Any]:
    """
    Retrieve a live row by its primary key.

    Returns:
        Instance if found and not soft-deleted, None otherwise
    """
    return live(db.query(model), model).filter(model.id == item_id).first()


def get_multi(db: Session, model, is_active: Optional[bool] = None) -> List[Any]:
    """
    List live rows in display order (sequence, then id).

    Args:
        db: Database session
        model: Sequenced model class
        is_active: Optional active/inactive filter
    """
    query = live(db.query(model), model)
    if is_active is not None:
        query = query.filter(model.is_active == is_active)
    return order_by_column(query, model, model.sequence).all()


def create(db: Session, model, data: Dict[str, Any]) -> Any:
    """
    Insert a new row from validated field values.
    """
    obj = model(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def update(db: Session, obj: Any, data: Dict[str, Any]) -> Any:
    """
    Apply a partial update.

    Explicit nulls are ignored for NOT NULL columns so a sparse form
    cannot blank out a required field.
    """
    columns = obj.__table__.c
    for field, value in data.items():
        if field not in columns:
            continue
        if value is None and not columns[field].nullable:
            continue
        setattr(obj, field, value)

    db.commit()
    db.refresh(obj)
    return obj


def delete(db: Session, obj: Any) -> None:
    """
    Soft delete where the table supports it, otherwise remove the row.
    """
    if is_soft_deletable(type(obj)):
        obj.deleted_at = datetime.now(timezone.utc)
    else:
        db.delete(obj)
    db.commit()
