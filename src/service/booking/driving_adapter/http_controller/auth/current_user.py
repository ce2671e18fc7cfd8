from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# auto_error=False: JwtAuth answers a missing or non-bearer header with 401
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """Resolve the caller from the `Authorization: Bearer <jwt>` header."""
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_user_id_from_jwt(token)
