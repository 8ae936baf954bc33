"""Employees module for staff management."""

from fastapi import APIRouter


router = APIRouter(prefix="/admin/employees", tags=["employees"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.employees import routes  # noqa: F401, E402
