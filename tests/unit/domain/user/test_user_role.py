"""Tests for the UserRole enum."""

import itertools

import pytest

from tessera_identity.domain.user import InvalidRoleError, UserRole

EXPECTED_LEVELS = {
    UserRole.ADMIN: 5,
    UserRole.TENANT_ADMIN: 4,
    UserRole.MANAGER: 3,
    UserRole.TENANT_USER: 2,
    UserRole.USER: 1,
}


class TestUserRoleParsing:
    """Tests for UserRole.from_string."""

    @pytest.mark.parametrize("role", list(UserRole))
    def test_parses_wire_values(self, role):
        """Every wire value parses back to its role."""
        assert UserRole.from_string(role.value) is role

    def test_wire_values(self):
        """Roles use the ROLE_ prefixed wire values."""
        assert [role.value for role in UserRole] == [
            "ROLE_ADMIN",
            "ROLE_USER",
            "ROLE_MANAGER",
            "ROLE_TENANT_ADMIN",
            "ROLE_TENANT_USER",
        ]

    def test_match_is_case_sensitive(self):
        """Lowercase wire values are rejected."""
        with pytest.raises(InvalidRoleError):
            UserRole.from_string("role_admin")

    def test_error_lists_valid_roles(self):
        """The error message lists every valid role."""
        with pytest.raises(InvalidRoleError) as exc_info:
            UserRole.from_string("ROLE_GOD")

        for role in UserRole:
            assert role.value in exc_info.value.message

    def test_str_is_wire_value(self):
        assert str(UserRole.MANAGER) == "ROLE_MANAGER"


class TestUserRoleHierarchy:
    """Tests for hierarchy levels and can_access_role."""

    @pytest.mark.parametrize(("role", "level"), EXPECTED_LEVELS.items())
    def test_hierarchy_levels(self, role, level):
        assert role.hierarchy_level == level

    @pytest.mark.parametrize(
        ("role", "target"),
        list(itertools.product(UserRole, repeat=2)),
    )
    def test_can_access_role_follows_levels(self, role, target):
        """A role can access another iff its level is at least as high."""
        expected = EXPECTED_LEVELS[role] >= EXPECTED_LEVELS[target]

        assert role.can_access_role(target) is expected


class TestUserRolePredicates:
    """Tests for privilege predicates."""

    def test_admin_privileges(self):
        holders = {role for role in UserRole if role.has_admin_privileges()}

        assert holders == {UserRole.ADMIN, UserRole.TENANT_ADMIN}

    def test_manager_privileges(self):
        holders = {role for role in UserRole if role.has_manager_privileges()}

        assert holders == {UserRole.ADMIN, UserRole.TENANT_ADMIN, UserRole.MANAGER}

    def test_tenant_management(self):
        holders = {role for role in UserRole if role.can_manage_tenant()}

        assert holders == {UserRole.ADMIN, UserRole.TENANT_ADMIN}

    def test_single_role_predicates(self):
        """Each is_* predicate is true only for its own role."""
        assert UserRole.ADMIN.is_admin()
        assert UserRole.USER.is_user()
        assert UserRole.MANAGER.is_manager()
        assert UserRole.TENANT_ADMIN.is_tenant_admin()
        assert UserRole.TENANT_USER.is_tenant_user()
        assert not UserRole.USER.is_admin()
        assert not UserRole.TENANT_ADMIN.is_admin()
