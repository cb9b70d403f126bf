"""
Health check and monitoring endpoints.

Provides health status for the database and the upload storage backend,
plus catalogue counts for the admin dashboard.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import func, text
from datetime import datetime, timezone

from app.core.database import get_db
from app.core.storage import StorageBackend, get_storage
from app.crud.sequenced import live

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "success": True,
        "status": "healthy",
        "timestamp": _now()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    Checks:
    - Database connectivity
    - Upload storage reachability (writable local directory or accessible S3 bucket)

    Component errors are logged; the response only reports healthy/unhealthy.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _now(),
        "checks": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {"status": "healthy"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {"status": "unhealthy"}

    try:
        storage.check()
        health_status["checks"]["storage"] = {
            "status": "healthy",
            "backend": type(storage).__name__
        }
    except Exception as e:
        logger.error(f"Storage health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["storage"] = {
            "status": "unhealthy",
            "backend": type(storage).__name__
        }

    return health_status


@router.get("/metrics", status_code=status.HTTP_200_OK)
def get_metrics(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Catalogue metrics: live (non-deleted) and active counts per sequenced table.
    """
    from app.api.endpoints.masters import MASTER_REGISTRY
    from app.models.subscription_plan import (
        EmployeeSubscriptionPlan,
        EmployerSubscriptionPlan,
        PlanBenefit,
    )

    models = {
        "employee_plans": EmployeeSubscriptionPlan,
        "employer_plans": EmployerSubscriptionPlan,
        "plan_benefits": PlanBenefit,
    }
    for name, resource in MASTER_REGISTRY.items():
        models[name.replace("-", "_")] = resource.model

    counts = {}
    for name, model in models.items():
        query = live(db.query(func.count(model.id)), model)
        counts[name] = {
            "total": query.scalar() or 0,
            "active": query.filter(model.is_active == True).scalar() or 0,
        }

    return {"timestamp": _now(), "metrics": counts}
