from oas_viewers.auth.names import NameAllocator


class TestNameAllocator:
    def test_first_name_is_sanitized_base(self):
        allocator = NameAllocator()
        assert allocator.allocate("apiKey", "viewer apiKey") == "viewerApiKey"
        assert allocator.used == {"apiKey": ["viewerApiKey"]}

    def test_second_name_of_kind_gets_suffix(self):
        allocator = NameAllocator()
        allocator.allocate("apiKey", "viewer apiKey")
        assert allocator.allocate("apiKey", "viewer apiKey") == "viewerApiKey2"

    def test_many_names_of_one_kind_stay_unique(self):
        allocator = NameAllocator()
        names = [allocator.allocate("apiKey", "viewer apiKey") for _ in range(5)]
        assert names == ["viewerApiKey", "viewerApiKey2", "viewerApiKey3", "viewerApiKey4", "viewerApiKey5"]

    def test_suffix_skips_past_taken_candidates(self):
        allocator = NameAllocator()
        allocator.allocate("apiKey", "viewer apiKey")
        assert allocator.allocate("apiKey", "viewer apiKey 3") == "viewerApiKey3"
        # len + 1 == 3 is taken already
        assert allocator.allocate("apiKey", "viewer apiKey") == "viewerApiKey4"
        assert len(set(allocator.used["apiKey"])) == 3

    def test_kinds_are_counted_separately(self):
        allocator = NameAllocator()
        assert allocator.allocate("apiKey", "viewer apiKey") == "viewerApiKey"
        assert allocator.allocate("basicAuth", "viewer basicAuth") == "viewerBasicAuth"
        assert allocator.used["basicAuth"] == ["viewerBasicAuth"]

    def test_reserved_names_are_never_returned(self):
        allocator = NameAllocator(reserved={"viewerAnyAuth"})
        assert allocator.allocate("anyAuth", "viewer anyAuth") == "viewerAnyAuth1"
