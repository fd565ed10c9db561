"""Tests for bulk pattern rights checks."""

import pytest

from rightsgate.access_control import AccessControl
from rightsgate.errors import PatternError, RightsError, UnauthorizedError
from rightsgate.guard import RightsCheck, check_rights, require_rights
from rightsgate.right import Right


@pytest.fixture
def acl() -> AccessControl:
    acl = AccessControl()
    acl.grant("user", Right.read_own("post"))
    acl.grant("user", Right.update_own("post"))
    acl.grant("admin", Right.delete_any("post"))
    return acl


class TestCheckRights:
    def test_all_held(self, acl):
        result = check_rights(acl.can_role("user"), ["read:own/post", "update:own/post"])
        assert result == RightsCheck(allowed=True, checked=("read:own/post", "update:own/post"))
        assert bool(result) is True

    def test_stops_at_first_denial(self, acl):
        patterns = ["read:own/post", "delete:any/post", "update:own/post"]
        result = check_rights(acl.can_role("user"), patterns)
        assert result.allowed is False
        assert bool(result) is False
        assert result.denied == "delete:any/post"
        assert result.checked == ("read:own/post", "delete:any/post")

    def test_multiple_roles(self, acl):
        result = check_rights(acl.can_roles(["user", "admin"]), ["read:own/post", "delete:any/post"])
        assert result.allowed is True

    def test_empty_list(self, acl):
        result = check_rights(acl.can_role("guest"), [])
        assert result.allowed is True
        assert result.checked == ()

    def test_malformed_pattern_raises(self, acl):
        with pytest.raises(PatternError):
            check_rights(acl.can_role("user"), ["read:own/post", "read own post"])

    def test_patterns_after_denial_not_parsed(self, acl):
        result = check_rights(acl.can_role("user"), ["delete:any/post", "garbage"])
        assert result.denied == "delete:any/post"

    def test_consumes_generator_lazily(self, acl):
        seen: list[str] = []

        def patterns():
            for pattern in ["delete:any/post", "read:own/post"]:
                seen.append(pattern)
                yield pattern

        check_rights(acl.can_role("user"), patterns())
        assert seen == ["delete:any/post"]


class TestRequireRights:
    def test_allowed(self, acl):
        assert require_rights(acl.can_role("user"), ["read:own/post"]) is None

    def test_denied(self, acl):
        with pytest.raises(UnauthorizedError) as exc_info:
            require_rights(acl.can_role("user"), ["read:own/post", "delete:any/post"])
        assert exc_info.value.pattern == "delete:any/post"
        assert exc_info.value.checked == ("read:own/post", "delete:any/post")
        assert isinstance(exc_info.value, RightsError)
        assert "delete:any/post" in str(exc_info.value)
