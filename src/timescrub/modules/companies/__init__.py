"""Companies module: the tenant root."""

from fastapi import APIRouter


router = APIRouter(prefix="/companies", tags=["companies"])

# Import routes to register them (must be after router is defined)
from timescrub.modules.companies import routes  # noqa: F401, E402
