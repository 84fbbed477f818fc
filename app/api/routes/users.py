from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.services.identity import IdentityService
from app.schemas.user import UserLogin, UserLoginEcho, UserRead
from app.mappings import map_to
from app.core.errors import describe_exception, internal_error
from app.core.logging import get_location, get_logger
from typing import Annotated
from starlette.status import HTTP_401_UNAUTHORIZED
router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead)
def login(
    data: UserLogin,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """
    User login. Verifies the credentials and returns the user record;
    no token or session is issued.
    """
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting Login call for user: %s", location, data.username)
        result = IdentityService.password_sign_in(db, data.username, data.password)
        if result.succeeded and result.user is not None:
            logger.info("%s: Successfully logged in user: %s", location, data.username)
            return map_to(result.user, UserRead)

        logger.warning("%s: Unauthorized login attempt denied for user: %s", location, data.username)
        return JSONResponse(
            status_code=HTTP_401_UNAUTHORIZED,
            content=UserLoginEcho(username=data.username).model_dump(),
        )
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")
