"""
API endpoints for the subscription catalogue.

Admin CRUD for employee plans, employer plans and plan benefits, the bulk
reorder endpoints used by the drag-and-drop lists, and the selfie upload
used during identity verification.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, File, HTTPException, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.sequencing import sequence_update_response
from app.core.database import get_db
from app.core.deps import get_active_filter
from app.core.errors import ErrorKind, error_response
from app.core.storage import StorageBackend, StorageError, get_storage
from app.crud import plan_benefit as benefit_crud
from app.crud import sequenced as sequenced_crud
from app.models.subscription_plan import (
    EmployeeSubscriptionPlan,
    EmployerSubscriptionPlan,
    PlanBenefit,
    SubscriptionType,
)
from app.schemas.common import APIResponse, MessageResponse, SequenceUpdateResponse, success_response
from app.schemas.subscription_plan import (
    BenefitSequenceRequest,
    EmployeePlanCreate,
    EmployeePlanResponse,
    EmployeePlanUpdate,
    EmployerPlanCreate,
    EmployerPlanResponse,
    EmployerPlanUpdate,
    PlanBenefitCreate,
    PlanBenefitResponse,
    PlanBenefitUpdate,
    PlanSequenceRequest,
    SelfieUploadResponse,
)
from app.services.selfie_upload import SelfieUploadError, store_selfie

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])
logger = logging.getLogger(__name__)


@router.post("/upload/selfie", response_model=SelfieUploadResponse)
def upload_selfie(
    selfie: Optional[UploadFile] = File(None),
    storage: StorageBackend = Depends(get_storage)
):
    """
    Upload a selfie image for identity verification.

    Accepts a multipart form with a single `selfie` image (max 5 MB by default).
    Returns the stored path and its public URL.
    """
    try:
        stored = store_selfie(selfie, storage)
    except SelfieUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        logger.error(f"Selfie storage failed: {e}")
        return error_response(ErrorKind.STORAGE_ERROR, "Failed to store file")

    return SelfieUploadResponse(**stored)


def _register_plan_routes(path: str, model, create_schema, update_schema, response_schema, label: str):
    """
    Wire list / reorder / get / create / update / delete routes for one plan catalogue.

    The /sequence route is registered before /{plan_id} so it is not captured
    by the id parameter.
    """

    @router.get(path, response_model=APIResponse[List[response_schema]], name=f"list_{label}_plans")
    def list_plans(db: Session = Depends(get_db)):
        """List live plans in display order (sequence, then id)."""
        plans = sequenced_crud.get_multi(db, model)
        return success_response([response_schema.model_validate(p) for p in plans])

    @router.put(f"{path}/sequence", response_model=SequenceUpdateResponse, name=f"update_{label}_plan_sequence")
    def update_plan_sequence(request: Optional[PlanSequenceRequest] = Body(None), db: Session = Depends(get_db)):
        """
        Bulk update display order.

        Body: {"plans": [{"id": 3, "sequence": 1}, ...]}. Entries with a
        non-numeric id are skipped; "" clears a sequence.
        """
        return sequence_update_response(db, model, request.plans if request else None)

    @router.get(f"{path}/{{plan_id}}", response_model=APIResponse[response_schema], name=f"get_{label}_plan")
    def get_plan(plan_id: int, db: Session = Depends(get_db)):
        plan = sequenced_crud.get_by_id(db, model, plan_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Plan not found")
        return success_response(response_schema.model_validate(plan))

    @router.post(path, status_code=201, response_model=APIResponse[response_schema], name=f"create_{label}_plan")
    def create_plan(request: create_schema, db: Session = Depends(get_db)):
        try:
            plan = sequenced_crud.create(db, model, request.model_dump())
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {label} plan: {e}")
            raise HTTPException(status_code=500, detail="Failed to create plan")

        logger.info(f"Created {label} plan {plan.id}: {plan.plan_name_english}")
        return success_response(response_schema.model_validate(plan))

    @router.put(f"{path}/{{plan_id}}", response_model=APIResponse[response_schema], name=f"update_{label}_plan")
    def update_plan(plan_id: int, request: update_schema, db: Session = Depends(get_db)):
        plan = sequenced_crud.get_by_id(db, model, plan_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Plan not found")

        try:
            plan = sequenced_crud.update(db, plan, request.model_dump(exclude_unset=True))
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {label} plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update plan")

        return success_response(response_schema.model_validate(plan))

    @router.delete(f"{path}/{{plan_id}}", response_model=MessageResponse, name=f"delete_{label}_plan")
    def delete_plan(plan_id: int, db: Session = Depends(get_db)):
        """Soft delete; the plan disappears from listings but stays in the table."""
        plan = sequenced_crud.get_by_id(db, model, plan_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Plan not found")

        try:
            sequenced_crud.delete(db, plan)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting {label} plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete plan")

        logger.info(f"Deleted {label} plan {plan_id}")
        return MessageResponse(message="Plan deleted successfully")


_register_plan_routes(
    "/employee-plans",
    EmployeeSubscriptionPlan,
    EmployeePlanCreate,
    EmployeePlanUpdate,
    EmployeePlanResponse,
    "employee",
)
_register_plan_routes(
    "/employer-plans",
    EmployerSubscriptionPlan,
    EmployerPlanCreate,
    EmployerPlanUpdate,
    EmployerPlanResponse,
    "employer",
)


@router.get("/plan-benefits", response_model=APIResponse[List[PlanBenefitResponse]])
def list_plan_benefits(
    subscription_type: Optional[str] = None,
    plan_id: Optional[str] = None,
    search: Optional[str] = None,
    is_active: Optional[bool] = Depends(get_active_filter),
    sort_field: str = "sequence",
    sort_dir: str = "asc",
    db: Session = Depends(get_db)
):
    """
    List plan benefits with optional filtering.

    Args:
        subscription_type: employee or employer
        plan_id: Only benefits of this plan
        search: Substring of the English or Hindi benefit text
        is_active: active / inactive / true / false
        sort_field: sequence (default), subscription_type, plan_id, benefit_english, benefit_hindi, is_active
        sort_dir: asc (default) or desc

    Unrecognised filter values are ignored rather than rejected.
    """
    type_filter = None
    if subscription_type:
        try:
            type_filter = SubscriptionType(subscription_type.strip().lower())
        except ValueError:
            type_filter = None

    plan_filter = None
    if plan_id:
        try:
            plan_filter = int(plan_id)
        except ValueError:
            plan_filter = None

    benefits = benefit_crud.get_multi(
        db,
        subscription_type=type_filter,
        plan_id=plan_filter,
        search=search,
        is_active=is_active,
        sort_field=sort_field,
        descending=sort_dir.strip().lower() == "desc"
    )
    return success_response([PlanBenefitResponse.model_validate(b) for b in benefits])


@router.put("/plan-benefits/sequence", response_model=SequenceUpdateResponse)
def update_plan_benefit_sequence(request: Optional[BenefitSequenceRequest] = Body(None), db: Session = Depends(get_db)):
    """
    Bulk update display order of plan benefits.

    Body: {"benefits": [{"id": 7, "sequence": 1}, ...]}
    """
    return sequence_update_response(db, PlanBenefit, request.benefits if request else None)


@router.get("/plan-benefits/{benefit_id}", response_model=APIResponse[PlanBenefitResponse])
def get_plan_benefit(benefit_id: int, db: Session = Depends(get_db)):
    benefit = sequenced_crud.get_by_id(db, PlanBenefit, benefit_id)
    if not benefit:
        raise HTTPException(status_code=404, detail="Benefit not found")
    return success_response(PlanBenefitResponse.model_validate(benefit))


@router.post("/plan-benefits", status_code=201, response_model=APIResponse[PlanBenefitResponse])
def create_plan_benefit(request: PlanBenefitCreate, db: Session = Depends(get_db)):
    try:
        benefit = sequenced_crud.create(db, PlanBenefit, request.model_dump())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating plan benefit: {e}")
        raise HTTPException(status_code=500, detail="Failed to create benefit")

    logger.info(f"Created plan benefit {benefit.id} for {benefit.subscription_type.value} plan {benefit.plan_id}")
    return success_response(PlanBenefitResponse.model_validate(benefit))


@router.put("/plan-benefits/{benefit_id}", response_model=APIResponse[PlanBenefitResponse])
def update_plan_benefit(benefit_id: int, request: PlanBenefitUpdate, db: Session = Depends(get_db)):
    benefit = sequenced_crud.get_by_id(db, PlanBenefit, benefit_id)
    if not benefit:
        raise HTTPException(status_code=404, detail="Benefit not found")

    try:
        benefit = sequenced_crud.update(db, benefit, request.model_dump(exclude_unset=True))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating plan benefit {benefit_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update benefit")

    return success_response(PlanBenefitResponse.model_validate(benefit))


@router.delete("/plan-benefits/{benefit_id}", response_model=MessageResponse)
def delete_plan_benefit(benefit_id: int, db: Session = Depends(get_db)):
    benefit = sequenced_crud.get_by_id(db, PlanBenefit, benefit_id)
    if not benefit:
        raise HTTPException(status_code=404, detail="Benefit not found")

    try:
        sequenced_crud.delete(db, benefit)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting plan benefit {benefit_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete benefit")

    logger.info(f"Deleted plan benefit {benefit_id}")
    return MessageResponse(message="Benefit deleted successfully")
