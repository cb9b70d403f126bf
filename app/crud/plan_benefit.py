"""
CRUD operations for PlanBenefit listings.

Creation, update and deletion go through app.crud.sequenced; this module
only adds the filtered admin listing.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.crud.sequenced import live, order_by_column
from app.models.subscription_plan import PlanBenefit, SubscriptionType

SORTABLE_FIELDS = {
    "sequence",
    "subscription_type",
    "plan_id",
    "benefit_english",
    "benefit_hindi",
    "is_active",
}


def get_multi(
    db: Session,
    subscription_type: Optional[SubscriptionType] = None,
    plan_id: Optional[int] = None,
    search: Optional[str] = None,
    is_active: Optional[bool] = None,
    sort_field: str = "sequence",
    descending: bool = False
) -> List[PlanBenefit]:
    """
    Retrieve benefits with optional filtering and sorting.

    Args:
        db: Database session
        subscription_type: Only benefits of employee or employer plans
        plan_id: Only benefits of this plan
        search: Substring matched against the English and Hindi text
        is_active: Optional active/inactive filter
        sort_field: One of SORTABLE_FIELDS; anything else falls back to sequence
        descending: Sort direction for sort_field (id always ascending)

    Returns:
        List of PlanBenefit instances
    """
    query = live(db.query(PlanBenefit), PlanBenefit)

    if subscription_type:
        query = query.filter(PlanBenefit.subscription_type == subscription_type)
    if plan_id is not None:
        query = query.filter(PlanBenefit.plan_id == plan_id)
    if is_active is not None:
        query = query.filter(PlanBenefit.is_active == is_active)

    term = (search or "").strip()
    if term:
        pattern = f"%{term}%"
        query = query.filter(or_(
            PlanBenefit.benefit_english.ilike(pattern),
            PlanBenefit.benefit_hindi.ilike(pattern)
        ))

    if sort_field not in SORTABLE_FIELDS:
        sort_field = "sequence"
    column = getattr(PlanBenefit, sort_field)

    return order_by_column(query, PlanBenefit, column, descending=descending).all()
