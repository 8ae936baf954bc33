"""Company service for business logic."""

from typing import Annotated

from fastapi import Depends

from timescrub.core.auth.schemas import Principal
from timescrub.core.permissions.guard import require_tenant_ownership
from timescrub.modules.companies.models import Company
from timescrub.modules.companies.repos import CompanyRepo


class CompanyService:
    """Read access to the principal's own company."""

    def __init__(self, repo: CompanyRepo) -> None:
        self.repo = repo

    async def get_own_company(self, principal: Principal) -> Company:
        """Get the company the principal belongs to.

        Raises:
            NotFoundError: If the company no longer exists
        """
        company = await self.repo.get_by_id(principal.company_id)
        return require_tenant_ownership(principal, company, "company", principal.company_id)


CompanySvc = Annotated[CompanyService, Depends(CompanyService)]
