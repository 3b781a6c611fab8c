"""Tests for the Rich result renderer."""

from core.domain.models import GravityMatch, ListMatch
from cli.ui_components import ADLIST_STYLE, DOMAIN_STYLE, QUERY_STYLE, render_search_results


def _styled(text, style):
    return [text.plain[span.start:span.end] for span in text.spans if span.style == style]


class TestRenderSearchResults:
    """Tests for render_search_results."""

    def test_zero_results(self):
        """Both headers are printed with a zero count and nothing else."""
        out = render_search_results("example.com", "exactly", [], [])

        assert out.plain == (
            "Found 0 domains exactly matching 'example.com'.\n\n"
            "Found 0 adlists exactly matching 'example.com'.\n\n"
        )

    def test_scenario(self):
        list_view = [ListMatch(domain="example.com", type="deny")]
        gravity_view = [
            GravityMatch(address="http://list1", domains=["example.com"]),
            GravityMatch(address="http://list2", domains=["sub.example.com"]),
        ]

        out = render_search_results("example.com", "exactly", list_view, gravity_view)

        assert out.plain == (
            "Found 1 domains exactly matching 'example.com'.\n\n"
            "  - example.com (type: exact deny domain)\n\n"
            "Found 2 adlists exactly matching 'example.com'.\n\n"
            "  - http://list1\n\n"
            "    - example.com\n"
            "\n\n"
            "  - http://list2\n\n"
            "    - sub.example.com\n"
            "\n\n"
        )

    def test_partial_wording(self):
        out = render_search_results("ads", "partially", [], [])

        assert "Found 0 domains partially matching 'ads'." in out.plain
        assert "Found 0 adlists partially matching 'ads'." in out.plain

    def test_highlighting(self):
        out = render_search_results(
            "example.com",
            "exactly",
            [ListMatch(domain="example.com", type="allow")],
            [GravityMatch(address="http://list1", domains=["ads.example.com", "example.com"])],
        )

        assert _styled(out, QUERY_STYLE).count("example.com") == 2
        assert "http://list1" in _styled(out, ADLIST_STYLE)
        assert _styled(out, DOMAIN_STYLE) == ["example.com", "ads.example.com", "example.com"]

    def test_markup_is_not_interpreted(self):
        """Values are appended as text, so brackets stay literal."""
        out = render_search_results("[bold]x", "exactly", [ListMatch(domain="[red]y", type="deny")], [])

        assert "'[bold]x'" in out.plain
        assert "  - [red]y (type: exact deny domain)" in out.plain
