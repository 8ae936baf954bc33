"""Company API routes."""

from timescrub.core.auth.dependencies import CurrentPrincipal
from timescrub.modules.companies import router
from timescrub.modules.companies.schemas import CompanyResponse
from timescrub.modules.companies.services import CompanySvc


@router.get(
    "/me",
    response_model=CompanyResponse,
    summary="Get current company",
    description="Returns the company of the authenticated employee.",
)
async def get_my_company(
    principal: CurrentPrincipal,
    service: CompanySvc,
) -> CompanyResponse:
    """Get the principal's company."""
    company = await service.get_own_company(principal)
    return CompanyResponse.model_validate(company)
