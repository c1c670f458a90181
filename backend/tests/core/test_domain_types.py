"""Domain Types — counter keys and resources."""

from app.core.domain_types import CounterKey, CounterResource, PORTFOLIO_VIEWS_KEY


def test_portfolio_views_key_is_fixed():
    assert PORTFOLIO_VIEWS_KEY == "portfolio-views"


def test_counter_key_wraps_str():
    assert CounterKey("about") == "about"


def test_counter_resources_match_table_names():
    assert {r.value for r in CounterResource} == {
        "portfolio_views", "project_clicks", "tab_visits",
    }
