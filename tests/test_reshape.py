"""Tests for reshaping raw search responses."""

import pytest

from core.domain.errors import MalformedResponseError
from core.domain.models import GravityMatch, ListMatch
from core.services.reshape import reshape_search_response


def _gravity(*pairs):
    return {"search": {"domains": [], "gravity": [{"domain": d, "address": a} for d, a in pairs]}}


class TestListView:
    """Tests for the allow/deny list view."""

    def test_projection_keeps_order(self):
        body = {
            "search": {
                "domains": [
                    {"domain": "b.example", "type": "allow", "kind": "exact", "id": 3},
                    {"domain": "a.example", "type": "deny", "kind": "regex", "id": 1},
                ],
                "gravity": [],
            }
        }

        list_view, gravity_view = reshape_search_response(body)

        assert list_view == [
            ListMatch(domain="b.example", type="allow"),
            ListMatch(domain="a.example", type="deny"),
        ]
        assert gravity_view == []

    def test_duplicates_are_kept(self):
        """List entries are projected one-to-one, never merged."""
        body = {
            "search": {
                "domains": [{"domain": "x.example", "type": "deny"}, {"domain": "x.example", "type": "deny"}],
                "gravity": [],
            }
        }

        list_view, _ = reshape_search_response(body)

        assert len(list_view) == 2


class TestGravityView:
    """Tests for grouping adlist matches by address."""

    def test_scenario(self, scenario_body):
        list_view, gravity_view = reshape_search_response(scenario_body)

        assert len(list_view) == 1
        assert gravity_view == [
            GravityMatch(address="http://list1", domains=["example.com"]),
            GravityMatch(address="http://list2", domains=["sub.example.com"]),
        ]

    def test_groups_in_first_seen_order(self):
        body = _gravity(
            ("a.example", "http://z-list"),
            ("b.example", "http://a-list"),
            ("c.example", "http://z-list"),
            ("a.example", "http://a-list"),
        )

        _, gravity_view = reshape_search_response(body)

        assert [g.address for g in gravity_view] == ["http://z-list", "http://a-list"]
        assert gravity_view[0].domains == ["a.example", "c.example"]
        assert gravity_view[1].domains == ["b.example", "a.example"]

    def test_address_case_is_significant(self):
        body = _gravity(("a.example", "http://List"), ("a.example", "http://list"))

        _, gravity_view = reshape_search_response(body)

        assert [g.address for g in gravity_view] == ["http://List", "http://list"]

    def test_delimiters_in_fields_are_preserved(self):
        """Commas in addresses or domains do not split anything."""
        body = _gravity(("weird,domain", "http://host/list?a=1,2"))

        _, gravity_view = reshape_search_response(body)

        assert gravity_view == [GravityMatch(address="http://host/list?a=1,2", domains=["weird,domain"])]

    def test_union_matches_input(self):
        pairs = [
            ("a.example", "http://l1"),
            ("b.example", "http://l2"),
            ("a.example", "http://l2"),
            ("c.example", "http://l1"),
            ("b.example", "http://l2"),
        ]

        _, gravity_view = reshape_search_response(_gravity(*pairs))

        assert {d for g in gravity_view for d in g.domains} == {d for d, _ in pairs}
        for group in gravity_view:
            expected = {d for d, a in pairs if a == group.address}
            assert set(group.domains) == expected
            assert len(group.domains) == len(expected)


class TestMalformedResponses:
    """Unexpected shapes are rejected as a whole."""

    @pytest.mark.parametrize(
        "body",
        [
            None,
            [],
            "401",
            {},
            {"search": {}},
            {"search": {"domains": []}},
            {"search": {"gravity": []}},
            {"search": {"domains": None, "gravity": []}},
            {"search": {"domains": [], "gravity": [{"domain": "a.example"}]}},
            {"search": {"domains": [{"type": "deny"}], "gravity": []}},
        ],
    )
    def test_rejected(self, body):
        with pytest.raises(MalformedResponseError):
            reshape_search_response(body)
