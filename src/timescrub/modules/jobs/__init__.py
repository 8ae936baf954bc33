"""Jobs module: units of work that time is logged against."""

from fastapi import APIRouter


router = APIRouter(tags=["jobs"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.jobs import routes  # noqa: F401, E402
