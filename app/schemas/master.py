from datetime import datetime, time
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, constr

from app.models.master import ExperienceUnit
from app.schemas.subscription_plan import SequencedFields


Label = constr(strip_whitespace=True, min_length=1)


class MasterCreate(SequencedFields):
    is_active: bool = True


class MasterRead(BaseModel):
    id: int
    sequence: Optional[int] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# States

class StateCreate(MasterCreate):
    state_english: Label
    state_hindi: Label


class StateUpdate(SequencedFields):
    state_english: Optional[Label] = None
    state_hindi: Optional[Label] = None


class StateRead(MasterRead):
    state_english: str
    state_hindi: str


# Cities

class CityCreate(MasterCreate):
    state_id: int = Field(..., gt=0)
    city_english: Label
    city_hindi: Label


class CityUpdate(SequencedFields):
    state_id: Optional[int] = Field(None, gt=0)
    city_english: Optional[Label] = None
    city_hindi: Optional[Label] = None


class CityRead(MasterRead):
    state_id: int
    city_english: str
    city_hindi: str


# Skills

class SkillCreate(MasterCreate):
    skill_english: Label
    skill_hindi: Label


class SkillUpdate(SequencedFields):
    skill_english: Optional[Label] = None
    skill_hindi: Optional[Label] = None


class SkillRead(MasterRead):
    skill_english: str
    skill_hindi: str


# Qualifications

class QualificationCreate(MasterCreate):
    qualification_english: Label
    qualification_hindi: Label


class QualificationUpdate(SequencedFields):
    qualification_english: Optional[Label] = None
    qualification_hindi: Optional[Label] = None


class QualificationRead(MasterRead):
    qualification_english: str
    qualification_hindi: str


# Shifts

class ShiftCreate(MasterCreate):
    shift_english: Label
    shift_hindi: Label
    shift_from: time
    shift_to: time


class ShiftUpdate(SequencedFields):
    shift_english: Optional[Label] = None
    shift_hindi: Optional[Label] = None
    shift_from: Optional[time] = None
    shift_to: Optional[time] = None


class ShiftRead(MasterRead):
    shift_english: str
    shift_hindi: str
    shift_from: time
    shift_to: time


# Job profiles (both names optional; a profile may be image-only)

class JobProfileCreate(MasterCreate):
    profile_english: Optional[str] = Field(None, max_length=150)
    profile_hindi: Optional[str] = Field(None, max_length=150)
    profile_image: Optional[str] = Field(None, max_length=255)


class JobProfileUpdate(SequencedFields):
    profile_english: Optional[str] = Field(None, max_length=150)
    profile_hindi: Optional[str] = Field(None, max_length=150)
    profile_image: Optional[str] = Field(None, max_length=255)


class JobProfileRead(MasterRead):
    profile_english: Optional[str] = None
    profile_hindi: Optional[str] = None
    profile_image: Optional[str] = None


# Business categories

class BusinessCategoryCreate(MasterCreate):
    category_english: Label
    category_hindi: Label


class BusinessCategoryUpdate(SequencedFields):
    category_english: Optional[Label] = None
    category_hindi: Optional[Label] = None


class BusinessCategoryRead(MasterRead):
    category_english: str
    category_hindi: str


# Work natures

class WorkNatureCreate(MasterCreate):
    nature_english: Label
    nature_hindi: Label


class WorkNatureUpdate(SequencedFields):
    nature_english: Optional[Label] = None
    nature_hindi: Optional[Label] = None


class WorkNatureRead(MasterRead):
    nature_english: str
    nature_hindi: str


# Experiences

class ExperienceCreate(MasterCreate):
    title_english: Label
    title_hindi: Label
    exp_from: int = Field(..., ge=0)
    exp_to: int = Field(..., ge=0)
    exp_type: ExperienceUnit = ExperienceUnit.YEAR


class ExperienceUpdate(SequencedFields):
    title_english: Optional[Label] = None
    title_hindi: Optional[Label] = None
    exp_from: Optional[int] = Field(None, ge=0)
    exp_to: Optional[int] = Field(None, ge=0)
    exp_type: Optional[ExperienceUnit] = None


class ExperienceRead(MasterRead):
    title_english: str
    title_hindi: str
    exp_from: int
    exp_to: int
    exp_type: ExperienceUnit


# Distances

class DistanceCreate(MasterCreate):
    title_english: Label
    title_hindi: Label
    distance: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class DistanceUpdate(SequencedFields):
    title_english: Optional[Label] = None
    title_hindi: Optional[Label] = None
    distance: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class DistanceRead(MasterRead):
    title_english: str
    title_hindi: str
    distance: Decimal
