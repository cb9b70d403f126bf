"""
Column mixins shared by the catalogue and reference-data tables.
"""

from sqlalchemy import Column, Integer, Boolean, DateTime, func, true


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class SoftDeleteMixin:
    """Rows are hidden by setting deleted_at instead of being removed."""
    deleted_at = Column(DateTime(timezone=True), nullable=True)


class SequencedMixin(TimestampMixin):
    """
    Integer primary key plus the display-ordering columns.

    sequence is purely cosmetic: lists sort by sequence ascending (NULLs last),
    ties broken by id. is_active does not affect reordering.
    """
    id = Column(Integer, primary_key=True, index=True)
    sequence = Column(Integer, nullable=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
