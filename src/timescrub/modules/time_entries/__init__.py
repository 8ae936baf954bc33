"""Time entries module: blocks of time employees log against jobs."""

from fastapi import APIRouter


router = APIRouter(prefix="/time-entries", tags=["time-entries"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.time_entries import routes  # noqa: F401, E402
