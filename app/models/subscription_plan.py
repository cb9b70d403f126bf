"""
Subscription catalogue models.

Employees and employers buy credit packs (plans) from separate catalogues;
each plan advertises a list of benefits. All three tables are ordered for
display by their sequence column and are soft-deleted.
"""

import enum
from sqlalchemy import Column, Integer, String, Numeric, Enum
from app.core.database import Base
from app.models.mixins import SequencedMixin, SoftDeleteMixin


class SubscriptionType(str, enum.Enum):
    """Which catalogue a plan benefit belongs to."""
    EMPLOYEE = "employee"
    EMPLOYER = "employer"


class PlanColumnsMixin(SequencedMixin, SoftDeleteMixin):
    plan_name_english = Column(String, nullable=False)
    plan_name_hindi = Column(String, nullable=True)
    plan_validity_days = Column(Integer, nullable=False, default=0)
    plan_tagline_english = Column(String, nullable=True)
    plan_tagline_hindi = Column(String, nullable=True)
    plan_price = Column(Numeric(12, 2), nullable=False, default=0)
    contact_credits = Column(Integer, nullable=False, default=0)
    interest_credits = Column(Numeric(12, 2), nullable=False, default=0)

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, name='{self.plan_name_english}', sequence={self.sequence})>"


class EmployeeSubscriptionPlan(PlanColumnsMixin, Base):
    __tablename__ = "employee_subscription_plans"


class EmployerSubscriptionPlan(PlanColumnsMixin, Base):
    """Employer plans additionally grant credits for posting job ads."""
    __tablename__ = "employer_subscription_plans"

    ad_credits = Column(Integer, nullable=False, default=0)


class PlanBenefit(SequencedMixin, SoftDeleteMixin, Base):
    """
    A single advertised benefit line of a plan.

    plan_id targets employee_subscription_plans or employer_subscription_plans
    depending on subscription_type, so it carries no foreign key.
    """
    __tablename__ = "plan_benefits"

    subscription_type = Column(
        Enum(
            SubscriptionType,
            name="plan_subscription_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        index=True,
    )
    plan_id = Column(Integer, nullable=False, index=True)
    benefit_english = Column(String, nullable=False)
    benefit_hindi = Column(String, nullable=True)

    def __repr__(self):
        return f"<PlanBenefit(id={self.id}, type={self.subscription_type.value}, plan_id={self.plan_id})>"
