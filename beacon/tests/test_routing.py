from unittest import mock

import pytest

from beacon.routing import PathRouter, Route, strip_scheme

REDIRECT_URL = "https://example.org/about"


@pytest.fixture
def router():
    return PathRouter(REDIRECT_URL, recorder=mock.Mock())


@pytest.mark.parametrize("path", ["", "/", "//", "///"])
def test_empty_path_redirects(router, path):
    route = router.route(path, {})
    assert route.kind == Route.REDIRECT
    assert route.target == REDIRECT_URL


def test_single_segment_is_landing(router):
    route = router.route("/UA-1234-1/", {}, "https://ref.example/")
    assert route == Route(kind=Route.LANDING, account="UA-1234-1", referer="https://ref.example/")


def test_page_keeps_inner_separators(router):
    route = router.route("/UA-1234-1/blog/2020/post/", {})
    assert route.kind == Route.HIT
    assert route.account == "UA-1234-1"
    assert route.page == "blog/2020/post"


def test_routing_is_idempotent(router):
    query = {"useReferer": [""]}
    first = router.route("/acct/page", query, "http://example.com/a/b")
    assert all(router.route("/acct/page", query, "http://example.com/a/b") == first for _ in range(5))


def test_use_referer_appends_referer_to_path(router):
    route = router.route("/acct/page", {"useReferer": [""]}, "https://example.com/x/y/z")
    assert route.kind == Route.HIT
    assert route.account == "acct"
    assert route.page == "page/example.com/x/y/z"


def test_use_referer_turns_landing_into_hit(router):
    route = router.route("/acct", {"useReferer": [""]}, "http://example.com/blog/post")
    assert route == Route(kind=Route.HIT, account="acct", page="example.com/blog/post")
    router.recorder.record_debug.assert_called_once()


def test_use_referer_without_referer_keeps_path(router):
    route = router.route("/acct", {"useReferer": [""]}, "")
    assert route.kind == Route.LANDING
    assert route.account == "acct"


def test_referer_of_only_a_scheme_is_ignored(router):
    route = router.route("/acct", {"useReferer": [""]}, "https://")
    assert route.kind == Route.LANDING


def test_referer_ignored_without_flag(router):
    route = router.route("/acct", {}, "https://example.com/x")
    assert route.kind == Route.LANDING


@pytest.mark.parametrize("referer,expected", [
    ("http://a.com/x", "a.com/x"),
    ("https://a.com/x", "a.com/x"),
    ("a.com/http://b", "a.com/http://b"),
    ("https://a.com/https://b", "a.com/https://b"),
])
def test_strip_scheme_only_strips_prefix(referer, expected):
    assert strip_scheme(referer) == expected
