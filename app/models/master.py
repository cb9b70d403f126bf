"""
Master (reference) data tables.

Bilingual lookup values shown in the apps' pickers: locations, skills,
qualifications, shifts and so on. Every table is admin-ordered through
its sequence column.
"""

import enum
from sqlalchemy import Column, Integer, String, Numeric, Time, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.mixins import SequencedMixin, SoftDeleteMixin


class ExperienceUnit(str, enum.Enum):
    MONTH = "month"
    YEAR = "year"


class State(SequencedMixin, Base):
    __tablename__ = "states"

    state_english = Column(String, nullable=False)
    state_hindi = Column(String, nullable=False)

    cities = relationship("City", back_populates="state", cascade="all, delete-orphan")


class City(SequencedMixin, Base):
    __tablename__ = "cities"

    state_id = Column(Integer, ForeignKey("states.id", ondelete="CASCADE"), nullable=False, index=True)
    city_english = Column(String, nullable=False)
    city_hindi = Column(String, nullable=False)

    state = relationship("State", back_populates="cities")


class Skill(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "skills"

    skill_english = Column(String, nullable=False)
    skill_hindi = Column(String, nullable=False)


class Qualification(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "qualifications"

    qualification_english = Column(String, nullable=False)
    qualification_hindi = Column(String, nullable=False)


class Shift(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "shifts"

    shift_english = Column(String, nullable=False)
    shift_hindi = Column(String, nullable=False)
    shift_from = Column(Time, nullable=False)
    shift_to = Column(Time, nullable=False)


class JobProfile(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "job_profiles"

    profile_english = Column(String(150), nullable=True)
    profile_hindi = Column(String(150), nullable=True)
    profile_image = Column(String(255), nullable=True)


class BusinessCategory(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "business_categories"

    category_english = Column(String, nullable=False)
    category_hindi = Column(String, nullable=False)


class WorkNature(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "work_natures"

    nature_english = Column(String, nullable=False)
    nature_hindi = Column(String, nullable=False)


class Experience(SequencedMixin, SoftDeleteMixin, Base):
    """Experience bracket, e.g. 1-3 years; exp_type gives the unit of exp_from/exp_to."""
    __tablename__ = "experiences"

    title_english = Column(String, nullable=False)
    title_hindi = Column(String, nullable=False)
    exp_from = Column(Integer, nullable=False)
    exp_to = Column(Integer, nullable=False)
    exp_type = Column(
        Enum(
            ExperienceUnit,
            name="experience_unit",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=ExperienceUnit.YEAR,
    )


class Distance(SequencedMixin, SoftDeleteMixin, Base):
    __tablename__ = "distances"

    title_english = Column(String, nullable=False)
    title_hindi = Column(String, nullable=False)
    distance = Column(Numeric(10, 2), nullable=False)
