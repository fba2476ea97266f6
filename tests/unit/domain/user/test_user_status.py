"""Tests for the UserStatus enum."""

import pytest

from tessera_identity.domain.user import InvalidStatusError, UserStatus


class TestUserStatusParsing:
    """Tests for UserStatus.from_string."""

    @pytest.mark.parametrize("status", list(UserStatus))
    def test_parses_wire_values(self, status):
        assert UserStatus.from_string(status.value) is status

    def test_match_is_case_sensitive(self):
        """Uppercase wire values are rejected."""
        with pytest.raises(InvalidStatusError):
            UserStatus.from_string("ACTIVE")

    def test_error_lists_valid_statuses(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            UserStatus.from_string("banned")

        for status in UserStatus:
            assert status.value in exc_info.value.message


class TestUserStatusPredicates:
    """Tests for lifecycle predicates."""

    def test_only_active_can_login(self):
        """ACTIVE is the only status allowed to log in."""
        assert UserStatus.ACTIVE.can_login() is True
        for status in UserStatus:
            if status is not UserStatus.ACTIVE:
                assert status.can_login() is False

    def test_can_be_activated(self):
        activatable = {status for status in UserStatus if status.can_be_activated()}

        assert activatable == {
            UserStatus.INACTIVE,
            UserStatus.PENDING,
            UserStatus.SUSPENDED,
        }

    def test_can_be_deactivated(self):
        deactivatable = {
            status for status in UserStatus if status.can_be_deactivated()
        }

        assert deactivatable == {UserStatus.ACTIVE}

    def test_is_predicates(self):
        assert UserStatus.ACTIVE.is_active()
        assert UserStatus.INACTIVE.is_inactive()
        assert UserStatus.PENDING.is_pending()
        assert UserStatus.SUSPENDED.is_suspended()
        assert UserStatus.DELETED.is_deleted()
        assert not UserStatus.PENDING.is_active()
