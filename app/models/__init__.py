"""
Database models package.
"""

from app.models.subscription_plan import (
    EmployeeSubscriptionPlan,
    EmployerSubscriptionPlan,
    PlanBenefit,
    SubscriptionType,
)
from app.models.master import (
    State,
    City,
    Skill,
    Qualification,
    Shift,
    JobProfile,
    BusinessCategory,
    WorkNature,
    Experience,
    ExperienceUnit,
    Distance,
)

__all__ = [
    "EmployeeSubscriptionPlan",
    "EmployerSubscriptionPlan",
    "PlanBenefit",
    "SubscriptionType",
    "State",
    "City",
    "Skill",
    "Qualification",
    "Shift",
    "JobProfile",
    "BusinessCategory",
    "WorkNature",
    "Experience",
    "ExperienceUnit",
    "Distance",
]
