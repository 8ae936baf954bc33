"""Authentication API routes.

Provides endpoints for:
- Login
- The current employee
"""

from fastapi import APIRouter

from timescrub.core.auth.dependencies import CurrentPrincipal
from timescrub.core.auth.schemas import AuthenticatedEmployee, LoginRequest, LoginResponse
from timescrub.core.auth.service import AuthSvc
from timescrub.modules.employees.schemas import MeResponse
from timescrub.modules.employees.services import EmployeeSvc


router = APIRouter(prefix="/auth", tags=["auth"])

me_router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive a 24 hour session token.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> LoginResponse:
    """Login with email and password."""
    employee, token = await service.login(email=data.email, password=data.password)

    return LoginResponse(
        access_token=token.access_token,
        expires_in=token.expires_in,
        employee=AuthenticatedEmployee.model_validate(employee),
    )


@me_router.get(
    "/me",
    response_model=MeResponse,
    summary="Get current employee",
    description="Returns the authenticated employee with their company.",
)
async def get_me(
    principal: CurrentPrincipal,
    service: EmployeeSvc,
) -> MeResponse:
    """Get the current employee."""
    employee = await service.get_me(principal)
    return MeResponse.model_validate(employee)
