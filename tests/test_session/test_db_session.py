from __future__ import annotations

from unittest.mock import Mock, patch
from sqlalchemy.orm import Session

from app.db.session import get_db, engine, SessionLocal


class TestDatabaseSession:
    """Test database session functionality."""

    def test_session_local_configuration(self):
        """Test that SessionLocal is properly configured."""
        assert hasattr(SessionLocal, '__call__')
        assert SessionLocal.kw.get('autocommit') is False
        assert SessionLocal.kw.get('autoflush') is False

    def test_engine_configuration(self):
        """Test that engine is properly configured."""
        assert engine is not None
        assert engine.url is not None

    @patch('app.db.session.SessionLocal')
    def test_get_db_yields_and_closes(self, mock_session_local):
        """Test that the request session is closed once the request is done."""
        mock_db = Mock(spec=Session)
        mock_session_local.return_value = mock_db

        generator = get_db()
        session = next(generator)

        mock_session_local.assert_called_once()
        assert session == mock_db
        mock_db.close.assert_not_called()

        try:
            next(generator)
        except StopIteration:
            pass

        mock_db.close.assert_called_once()

    @patch('app.db.session.SessionLocal')
    def test_get_db_closes_on_error(self, mock_session_local):
        """Test that the session is closed when the handler raises."""
        mock_db = Mock(spec=Session)
        mock_session_local.return_value = mock_db

        generator = get_db()
        _ = next(generator)

        try:
            generator.throw(RuntimeError("handler failed"))
        except RuntimeError:
            pass

        mock_db.close.assert_called_once()

    @patch('app.db.session.SessionLocal')
    def test_each_request_gets_its_own_session(self, mock_session_local):
        mock_session_local.side_effect = [Mock(spec=Session), Mock(spec=Session)]

        first = next(get_db())
        second = next(get_db())

        assert first is not second
