from oas_viewers.auth.context import RESERVED_KEY, credentials_for, get_security, security_context


class TestSecurityContext:
    def test_wraps_under_reserved_key(self):
        assert security_context({"apiKey": {"apiKey": "abc"}}) == {
            RESERVED_KEY: {"security": {"apiKey": {"apiKey": "abc"}}}
        }

    def test_get_security_without_viewer(self):
        assert get_security(None) is None
        assert get_security({"name": "rex"}) is None
        assert get_security({RESERVED_KEY: "garbage"}) is None

    def test_get_security_from_viewer_value(self):
        parent = security_context({"apiKey": {"apiKey": "abc"}})
        assert get_security(parent) == {"apiKey": {"apiKey": "abc"}}


class TestCredentialsFor:
    def test_raw_protocol_name_is_recovered(self):
        parent = security_context({"petstoreAuth": {"apiKey": "abc"}})
        assert credentials_for(parent, "petstore_auth", {"petstoreAuth": "petstore_auth"}) == {"apiKey": "abc"}

    def test_protocol_not_supplied(self):
        parent = security_context({"petstoreAuth": {"apiKey": "abc"}})
        assert credentials_for(parent, "basic_auth", {"petstoreAuth": "petstore_auth"}) is None

    def test_no_viewer_used(self):
        assert credentials_for({}, "petstore_auth", {}) is None
