from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.logging import get_logger
from app.models.user import ADMINISTRATOR, CUSTOMER
from app.services.identity import IdentityService


def seed_identity(db: Session, settings: Settings) -> None:
    """
    Ensure both roles exist; create the admin user when
    SEED_ADMIN_PASSWORD is set and the username is free.
    """
    logger = get_logger(__name__)
    for name in (ADMINISTRATOR, CUSTOMER):
        _ = IdentityService.ensure_role(db, name)
    db.commit()

    if not settings.SEED_ADMIN_PASSWORD:
        return
    if IdentityService.find_by_name(db, settings.SEED_ADMIN_USERNAME) is not None:
        return

    _ = IdentityService.create_user(
        db,
        username=settings.SEED_ADMIN_USERNAME,
        password=settings.SEED_ADMIN_PASSWORD,
        roles=[ADMINISTRATOR],
        email=settings.SEED_ADMIN_EMAIL,
    )
    logger.info("Seeded administrator user: %s", settings.SEED_ADMIN_USERNAME)
