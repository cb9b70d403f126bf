"""
API endpoints for master (reference) data.

One set of routes serves every registered master table; the path segment
picks the model and the schemas used to validate and serialize it.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Type

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.sequencing import sequence_update_response
from app.core.database import get_db
from app.core.deps import get_active_filter
from app.crud import sequenced as sequenced_crud
from app.models.master import (
    BusinessCategory,
    City,
    Distance,
    Experience,
    JobProfile,
    Qualification,
    Shift,
    Skill,
    State,
    WorkNature,
)
from app.schemas import master as schemas
from app.schemas.common import MessageResponse, SequenceEntry, SequenceUpdateResponse, success_response

router = APIRouter(prefix="/masters", tags=["Masters"])
logger = logging.getLogger(__name__)


class MasterResource(NamedTuple):
    model: Type
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    entries_field: str  # key holding the list in the bulk sequence body
    label: str


MASTER_REGISTRY: Dict[str, MasterResource] = {
    "states": MasterResource(State, schemas.StateCreate, schemas.StateUpdate, schemas.StateRead, "states", "State"),
    "cities": MasterResource(City, schemas.CityCreate, schemas.CityUpdate, schemas.CityRead, "cities", "City"),
    "skills": MasterResource(Skill, schemas.SkillCreate, schemas.SkillUpdate, schemas.SkillRead, "skills", "Skill"),
    "qualifications": MasterResource(
        Qualification, schemas.QualificationCreate, schemas.QualificationUpdate, schemas.QualificationRead,
        "qualifications", "Qualification",
    ),
    "shifts": MasterResource(Shift, schemas.ShiftCreate, schemas.ShiftUpdate, schemas.ShiftRead, "shifts", "Shift"),
    "job-profiles": MasterResource(
        JobProfile, schemas.JobProfileCreate, schemas.JobProfileUpdate, schemas.JobProfileRead,
        "profiles", "Job profile",
    ),
    "business-categories": MasterResource(
        BusinessCategory, schemas.BusinessCategoryCreate, schemas.BusinessCategoryUpdate,
        schemas.BusinessCategoryRead, "categories", "Business category",
    ),
    "work-natures": MasterResource(
        WorkNature, schemas.WorkNatureCreate, schemas.WorkNatureUpdate, schemas.WorkNatureRead,
        "natures", "Work nature",
    ),
    "experiences": MasterResource(
        Experience, schemas.ExperienceCreate, schemas.ExperienceUpdate, schemas.ExperienceRead,
        "experiences", "Experience",
    ),
    "distances": MasterResource(
        Distance, schemas.DistanceCreate, schemas.DistanceUpdate, schemas.DistanceRead,
        "distances", "Distance",
    ),
}


def get_master(master_name: str) -> MasterResource:
    resource = MASTER_REGISTRY.get(master_name)
    if not resource:
        raise HTTPException(status_code=404, detail=f"Unknown master '{master_name}'")
    return resource


def _validate(schema: Type[BaseModel], payload: Dict[str, Any]) -> BaseModel:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


def _serialize(resource: MasterResource, obj: Any) -> Dict[str, Any]:
    return resource.read_schema.model_validate(obj).model_dump(mode="json")


def _check_state(db: Session, data: Dict[str, Any]) -> None:
    """Cities must point at an existing state"""
    state_id = data.get("state_id")
    if state_id is not None and sequenced_crud.get_by_id(db, State, state_id) is None:
        raise HTTPException(status_code=404, detail=f"State {state_id} not found")


@router.get("")
def list_master_types():
    """Names of all registered masters."""
    return success_response(sorted(MASTER_REGISTRY.keys()))


@router.get("/{master_name}")
def list_master_items(
    master_name: str,
    is_active: Optional[bool] = Depends(get_active_filter),
    db: Session = Depends(get_db)
):
    """
    List a master's values in display order (sequence, then id).

    Args:
        is_active: Optional filter, active / inactive / true / false
    """
    resource = get_master(master_name)
    items = sequenced_crud.get_multi(db, resource.model, is_active=is_active)
    return success_response([_serialize(resource, obj) for obj in items])


@router.put("/{master_name}/bulk/sequence", response_model=SequenceUpdateResponse)
def update_master_sequence(
    master_name: str,
    body: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Bulk update display order of a master's values.

    The list lives under a master-specific key, e.g. {"states": [...]} or
    {"profiles": [...]} for job profiles.
    """
    resource = get_master(master_name)
    payload = body or {}
    entries_payload = payload.get(resource.entries_field)

    entries: Optional[List[Any]] = None
    if entries_payload is not None:
        if not isinstance(entries_payload, list):
            raise HTTPException(status_code=422, detail=f"'{resource.entries_field}' must be a list")
        entries = [_validate(SequenceEntry, item) for item in entries_payload]

    return sequence_update_response(db, resource.model, entries)


@router.get("/{master_name}/{item_id}")
def get_master_item(master_name: str, item_id: int, db: Session = Depends(get_db)):
    resource = get_master(master_name)
    obj = sequenced_crud.get_by_id(db, resource.model, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")
    return success_response(_serialize(resource, obj))


@router.post("/{master_name}", status_code=201)
def create_master_item(
    master_name: str,
    body: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    resource = get_master(master_name)
    data = _validate(resource.create_schema, body).model_dump()
    if resource.model is City:
        _check_state(db, data)

    try:
        obj = sequenced_crud.create(db, resource.model, data)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating {master_name} item: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create {resource.label.lower()}")

    logger.info(f"Created {master_name} item {obj.id}")
    return success_response(_serialize(resource, obj))


@router.put("/{master_name}/{item_id}")
def update_master_item(
    master_name: str,
    item_id: int,
    body: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    resource = get_master(master_name)
    obj = sequenced_crud.get_by_id(db, resource.model, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")

    data = _validate(resource.update_schema, body).model_dump(exclude_unset=True)
    if resource.model is City:
        _check_state(db, data)

    try:
        obj = sequenced_crud.update(db, obj, data)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating {master_name} item {item_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update {resource.label.lower()}")

    return success_response(_serialize(resource, obj))


@router.delete("/{master_name}/{item_id}", response_model=MessageResponse)
def delete_master_item(master_name: str, item_id: int, db: Session = Depends(get_db)):
    """
    Delete a master value. Soft-deletable masters keep the row with deleted_at set;
    states and cities are removed (a state's cities go with it).
    """
    resource = get_master(master_name)
    obj = sequenced_crud.get_by_id(db, resource.model, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")

    try:
        sequenced_crud.delete(db, obj)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting {master_name} item {item_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete {resource.label.lower()}")

    logger.info(f"Deleted {master_name} item {item_id}")
    return MessageResponse(message=f"{resource.label} deleted successfully")
