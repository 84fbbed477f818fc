from collections.abc import Callable
from typing import Annotated
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.core.logging import get_logger
from app.db.session import get_db
from app.models.user import User
from app.services.identity import IdentityService

basic_scheme = HTTPBasic(auto_error=False)


def require_roles(*roles: str) -> Callable[..., User]:
    """
    Dependency allowing users holding any of `roles`.
    - 401 if credentials are missing or wrong
    - 403 if the user has none of the roles
    """

    def dependency(
        request: Request,
        credentials: Annotated[HTTPBasicCredentials | None, Depends(basic_scheme)],
        db: Annotated[Session, Depends(get_db)],
    ) -> User:
        logger = get_logger(__name__, request)
        if credentials is None:
            raise HTTPException(
                status_code=HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
                headers={"WWW-Authenticate": "Basic"},
            )

        result = IdentityService.password_sign_in(
            db, credentials.username, credentials.password
        )
        if not result.succeeded or result.user is None:
            logger.warning("Rejected credentials for user: %s", credentials.username)
            raise HTTPException(
                status_code=HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
                headers={"WWW-Authenticate": "Basic"},
            )

        if not set(roles) & set(result.user.role_names):
            logger.warning("User %s lacks roles %s", credentials.username, ", ".join(roles))
            raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Forbidden")
        return result.user

    return dependency
