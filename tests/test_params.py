"""Query string and body parameter tests."""

from github_manager.domain.params import Params
from github_manager.domain.records.cache import CacheSort


class TestQueryString:
    """Rendering of ``Params.create_query_string``."""

    def test_pagination_keeps_insertion_order(self):
        params = Params().add_param("per_page", 50).add_param("page", 2)

        assert params.create_query_string() == "?per_page=50&page=2"

    def test_empty_params_render_nothing(self):
        assert Params().create_query_string() == ""

    def test_none_values_are_skipped(self):
        params = Params(key="linux-node", ref=None)

        assert params.create_query_string() == "?key=linux-node"

    def test_only_none_values_render_nothing(self):
        assert Params(ref=None).create_query_string() == ""

    def test_reserved_characters_are_escaped(self):
        params = Params(q="a b&c=d")

        assert params.create_query_string() == "?q=a+b%26c%3Dd"

    def test_booleans_are_lowercase(self):
        assert Params(featured=True).create_query_string() == "?featured=true"

    def test_enum_values_use_their_value(self):
        params = Params(sort=CacheSort.SIZE_IN_BYTES)

        assert params.create_query_string() == "?sort=size_in_bytes"


class TestParamsBuilding:
    def test_add_params_chains(self):
        params = Params().add_params(state="open", labels="bug").add_param("page", 1)

        assert list(params.items()) == [("state", "open"), ("labels", "bug"), ("page", 1)]

    def test_of_copies(self):
        source = Params(title="x")
        copy = Params.of(source)
        copy.add_param("body", "y")

        assert "body" not in source

    def test_of_none_is_empty(self):
        assert Params.of(None) == {}
