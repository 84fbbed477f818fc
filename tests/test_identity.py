import pytest
from app.core.config import Settings
from app.db.seed import seed_identity
from app.models.user import ADMINISTRATOR, CUSTOMER, Role
from app.services.identity import IdentityService
from app.utils.password_hasher import check_password, hash_password


class TestPasswordHasher:
    """Test argon2 password hashing helpers."""

    def test_hash_is_not_plain(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert hashed.startswith("$argon2")

    def test_check_password(self):
        hashed = hash_password("s3cret")
        assert check_password(hashed, "s3cret") is True
        assert check_password(hashed, "wrong") is False

    def test_check_password_malformed_hash(self):
        assert check_password("not-a-hash", "anything") is False


class TestIdentityService:
    """Test sign-in and user management."""

    def test_create_user_with_roles(self, db_session):
        user = IdentityService.create_user(
            db_session, "editor", "pw", roles=[ADMINISTRATOR, CUSTOMER]
        )

        assert user.id is not None
        assert user.role_names == [ADMINISTRATOR, CUSTOMER]
        assert user.password_hash != "pw"

    def test_ensure_role_is_idempotent(self, db_session):
        first = IdentityService.ensure_role(db_session, CUSTOMER)
        second = IdentityService.ensure_role(db_session, CUSTOMER)

        assert first.id == second.id
        assert db_session.query(Role).count() == 1

    def test_password_sign_in(self, db_session):
        IdentityService.create_user(db_session, "reader", "pw", roles=[CUSTOMER])

        ok = IdentityService.password_sign_in(db_session, "reader", "pw")
        bad = IdentityService.password_sign_in(db_session, "reader", "nope")
        unknown = IdentityService.password_sign_in(db_session, "ghost", "pw")

        assert ok.succeeded is True
        assert ok.user.username == "reader"
        assert bad.succeeded is False and bad.user is None
        assert unknown.succeeded is False and unknown.user is None

    def test_find_by_name(self, db_session):
        IdentityService.create_user(db_session, "reader", "pw", roles=[])

        assert IdentityService.find_by_name(db_session, "reader").username == "reader"
        assert IdentityService.find_by_name(db_session, "READER") is None


class TestSeedIdentity:
    """Test startup seeding of roles and the admin user."""

    def test_seed_roles_only(self, db_session):
        seed_identity(db_session, Settings(SEED_ADMIN_PASSWORD=None))

        names = sorted(r.name for r in db_session.query(Role).all())
        assert names == [ADMINISTRATOR, CUSTOMER]
        assert IdentityService.find_by_name(db_session, "admin") is None

    def test_seed_admin(self, db_session):
        settings = Settings(SEED_ADMIN_USERNAME="root", SEED_ADMIN_PASSWORD="pw")

        seed_identity(db_session, settings)
        seed_identity(db_session, settings)

        user = IdentityService.find_by_name(db_session, "root")
        assert user is not None
        assert user.role_names == [ADMINISTRATOR]
        assert IdentityService.password_sign_in(db_session, "root", "pw").succeeded

    @pytest.mark.parametrize("password", ["", None])
    def test_seed_skips_admin_without_password(self, db_session, password):
        seed_identity(db_session, Settings(SEED_ADMIN_USERNAME="root", SEED_ADMIN_PASSWORD=password))
        assert IdentityService.find_by_name(db_session, "root") is None
