"""Job locations module: the sites where a customer's work happens."""

from fastapi import APIRouter


router = APIRouter(prefix="/admin", tags=["locations"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.locations import routes  # noqa: F401, E402
