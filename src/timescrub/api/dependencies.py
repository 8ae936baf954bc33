"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from timescrub.core.constants import MAX_INT_ID
from timescrub.core.database import get_db


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Path id within the range of an integer primary key
EntityId = Annotated[int, Path(ge=1, le=MAX_INT_ID)]
