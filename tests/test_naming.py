from oas_viewers.schema.naming import CaseStyle, desanitize, sanitize, sanitize_and_store, sort_by_key


class TestSanitize:
    def test_viewer_names(self):
        assert sanitize("viewer apiKey") == "viewerApiKey"
        assert sanitize("mutation viewer basicAuth") == "mutationViewerBasicAuth"

    def test_already_safe_name_is_unchanged(self):
        assert sanitize("apiKeyAuth") == "apiKeyAuth"

    def test_separators_are_removed(self):
        assert sanitize("api_key") == "apiKey"
        assert sanitize("get /pets/{petId}") == "getPetsPetId"

    def test_pascal_case(self):
        assert sanitize("basic_auth", CaseStyle.PASCAL) == "BasicAuth"

    def test_leading_digit_is_prefixed(self):
        assert sanitize("2fa") == "_2fa"

    def test_empty_name(self):
        assert sanitize("$$") == "_"


class TestSaneMap:
    def test_store_and_recover(self):
        sane_map = {}
        safe = sanitize_and_store("petstore_auth", sane_map)
        assert safe == "petstoreAuth"
        assert desanitize(safe, sane_map) == "petstore_auth"

    def test_same_raw_name_keeps_its_safe_name(self):
        sane_map = {}
        assert sanitize_and_store("api_key", sane_map) == "apiKey"
        assert sanitize_and_store("api_key", sane_map) == "apiKey"
        assert sane_map == {"apiKey": "api_key"}

    def test_colliding_raw_names_stay_reversible(self):
        sane_map = {}
        first = sanitize_and_store("api_key", sane_map)
        second = sanitize_and_store("api-key", sane_map)
        third = sanitize_and_store("api key", sane_map)
        assert (first, second, third) == ("apiKey", "apiKey2", "apiKey3")
        assert desanitize(first, sane_map) == "api_key"
        assert desanitize(second, sane_map) == "api-key"
        assert desanitize(third, sane_map) == "api key"

    def test_unknown_name_is_returned_as_is(self):
        assert desanitize("apiKey", {}) == "apiKey"


class TestSortByKey:
    def test_sorts_keys(self):
        assert list(sort_by_key({"b": 1, "a": 2, "c": 3})) == ["a", "b", "c"]
