"""
Unit tests for blog_backend.application.session
"""
import pytest
from blog_backend.application.session import Session
from blog_backend.core.exceptions import (
    InvalidTokenError,
    NoSessionError,
    UnauthenticatedError,
)
from blog_backend.core.security import create_session_token


class TestSessionResolution:
    """Tests for Session.from_token"""

    def test_no_cookie_is_absent(self):
        session = Session.from_token(None)
        assert session.present is False
        assert session.verified is False

    def test_valid_token_is_verified(self, mock_settings):
        session = Session.from_token(create_session_token("usr-1"))
        assert session.present is True
        assert session.user_id == "usr-1"
        assert session.error is None

    def test_bad_token_is_rejected_not_raised(self, mock_settings):
        session = Session.from_token("not-a-token")
        assert session.present is True
        assert session.verified is False
        assert session.error

    def test_empty_cookie_counts_as_present(self, mock_settings):
        session = Session.from_token("")
        assert session.present is True
        assert session.verified is False


class TestRequireUserId:
    """Tests for Session.require_user_id"""

    def test_absent_raises_unauthenticated(self):
        with pytest.raises(UnauthenticatedError, match="You are not logged in"):
            Session.absent().require_user_id()

    def test_absent_raises_given_error(self):
        with pytest.raises(NoSessionError, match="No session exists"):
            Session.absent().require_user_id(missing=NoSessionError)

    def test_rejected_raises_invalid_token(self, mock_settings):
        session = Session.from_token("not-a-token")
        with pytest.raises(InvalidTokenError, match="Unauthorized to create"):
            session.require_user_id(invalid_message="Unauthorized to create")

    def test_verified_returns_user_id(self, mock_settings):
        session = Session.from_token(create_session_token("usr-9"))
        assert session.require_user_id() == "usr-9"
