"""
HTTP wrapper around the bulk reorder operation, shared by every
PUT .../sequence endpoint.
"""

import logging
from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session

from app.core.errors import ErrorKind, error_response
from app.crud import sequence as sequence_crud
from app.schemas.common import SequenceUpdateResponse

logger = logging.getLogger(__name__)


def sequence_update_response(db: Session, model, entries: Optional[Iterable[Any]]):
    """
    Apply a reorder batch and build the HTTP answer.

    The batch either lands completely (200 with the attempted count) or not at
    all (500 with a generic persistence error; details stay in the logs).
    """
    try:
        updated = sequence_crud.apply_sequence_updates(db, model, entries)
    except Exception as e:
        logger.error(f"Sequence update failed for {model.__tablename__}: {e}")
        return error_response(ErrorKind.PERSISTENCE_ERROR, "Failed to update sequence")

    return SequenceUpdateResponse(updated=updated)
