"""Customers module: the clients a company does work for."""

from fastapi import APIRouter


router = APIRouter(prefix="/admin/customers", tags=["customers"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.customers import routes  # noqa: F401, E402
