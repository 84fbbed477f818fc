from __future__ import annotations
from dataclasses import dataclass
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.utils.password_hasher import check_password, hash_password
from app.models.user import Role, User


@dataclass(frozen=True)
class SignInResult:
    succeeded: bool
    user: User | None = None


class IdentityService:
    @staticmethod
    # Get a user by username
    def find_by_name(db: Session, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return db.scalars(stmt).first()

    @staticmethod
    # Verify a username/password pair
    def password_sign_in(db: Session, username: str, password: str) -> SignInResult:
        user = IdentityService.find_by_name(db, username)
        if user is None or not check_password(user.password_hash, password):
            return SignInResult(succeeded=False)
        return SignInResult(succeeded=True, user=user)

    @staticmethod
    # Get a role by name, creating it if missing
    def ensure_role(db: Session, name: str) -> Role:
        role = db.scalars(select(Role).where(Role.name == name)).first()
        if role is None:
            role = Role(name=name)
            db.add(role)
            db.flush()
        return role

    @staticmethod
    # Create a user with the given roles
    def create_user(
        db: Session,
        username: str,
        password: str,
        roles: list[str],
        email: str | None = None,
    ) -> User:
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            roles=[IdentityService.ensure_role(db, name) for name in roles],
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
