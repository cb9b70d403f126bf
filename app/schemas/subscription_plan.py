from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from app.models.subscription_plan import SubscriptionType
from app.schemas.common import SequenceEntry, blank_to_none


class SequencedFields(BaseModel):
    """sequence / is_active as accepted on create and update"""
    sequence: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("sequence", mode="before")
    @classmethod
    def clear_blank_sequence(cls, v):
        return blank_to_none(v)


class EmployeePlanCreate(SequencedFields):
    """Schema for creating an employee subscription plan"""
    plan_name_english: str = Field(..., min_length=1, max_length=255)
    plan_name_hindi: Optional[str] = None
    plan_validity_days: int = Field(..., ge=0)
    plan_tagline_english: Optional[str] = None
    plan_tagline_hindi: Optional[str] = None
    plan_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    contact_credits: int = Field(..., ge=0)
    interest_credits: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    is_active: bool = True


class EmployerPlanCreate(EmployeePlanCreate):
    """Employer plans also require ad credits"""
    ad_credits: int = Field(..., ge=0)


class EmployeePlanUpdate(SequencedFields):
    """Partial update; only supplied fields change"""
    plan_name_english: Optional[str] = Field(None, min_length=1, max_length=255)
    plan_name_hindi: Optional[str] = None
    plan_validity_days: Optional[int] = Field(None, ge=0)
    plan_tagline_english: Optional[str] = None
    plan_tagline_hindi: Optional[str] = None
    plan_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    contact_credits: Optional[int] = Field(None, ge=0)
    interest_credits: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class EmployerPlanUpdate(EmployeePlanUpdate):
    ad_credits: Optional[int] = Field(None, ge=0)


class EmployeePlanResponse(BaseModel):
    """Schema for plan response"""
    id: int
    plan_name_english: str
    plan_name_hindi: Optional[str] = None
    plan_validity_days: int
    plan_tagline_english: Optional[str] = None
    plan_tagline_hindi: Optional[str] = None
    plan_price: Decimal
    contact_credits: int
    interest_credits: Decimal
    sequence: Optional[int] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class EmployerPlanResponse(EmployeePlanResponse):
    ad_credits: int


class PlanBenefitCreate(SequencedFields):
    """Schema for creating a plan benefit"""
    subscription_type: SubscriptionType
    plan_id: int = Field(..., gt=0)
    benefit_english: str = Field(..., min_length=1)
    benefit_hindi: Optional[str] = None
    is_active: bool = True


class PlanBenefitUpdate(SequencedFields):
    subscription_type: Optional[SubscriptionType] = None
    plan_id: Optional[int] = Field(None, gt=0)
    benefit_english: Optional[str] = Field(None, min_length=1)
    benefit_hindi: Optional[str] = None


class PlanBenefitResponse(BaseModel):
    id: int
    subscription_type: SubscriptionType
    plan_id: int
    benefit_english: str
    benefit_hindi: Optional[str] = None
    sequence: Optional[int] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PlanSequenceRequest(BaseModel):
    """Body of PUT /employee-plans/sequence and /employer-plans/sequence"""
    plans: Optional[List[SequenceEntry]] = None


class BenefitSequenceRequest(BaseModel):
    """Body of PUT /plan-benefits/sequence"""
    benefits: Optional[List[SequenceEntry]] = None


class SelfieUploadResponse(BaseModel):
    success: bool = True
    path: str
    url: str
