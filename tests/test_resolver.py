import warnings

import pytest
import requests

from loader.resolver import github_pages_candidate, resolve_live_url


class TestGithubPagesCandidate:
    @pytest.mark.parametrize("url, expected", [
        ("https://github.com/alice/site", "https://alice.github.io/site"),
        ("https://github.com/alice/site.git", "https://alice.github.io/site"),
        ("https://www.github.com/alice/site/tree/main/docs", "https://alice.github.io/site"),
        ("  https://github.com/alice/site/  ", "https://alice.github.io/site"),
    ])
    def test_repository_urls(self, url, expected):
        assert github_pages_candidate(url) == expected

    @pytest.mark.parametrize("url", [
        "https://github.com/alice",
        "https://github.com/",
        "https://gist.github.com/alice/abc123",
        "https://alice.github.io/site",
        "https://example.com/alice/site",
        "https://notgithub.com/alice/site",
    ])
    def test_other_urls(self, url):
        assert github_pages_candidate(url) is None


class TestResolveLiveUrl:
    def test_uses_pages_site_when_it_answers(self, fake_session):
        session = fake_session({"https://alice.github.io/site": ""})
        assert resolve_live_url("https://github.com/alice/site", session) == "https://alice.github.io/site"
        session.head.assert_called_once()

    def test_keeps_original_on_error_status(self, fake_session, fake_response):
        session = fake_session({"https://alice.github.io/site": fake_response(status=404)})
        url = "https://github.com/alice/site"
        assert resolve_live_url(url, session) == url

    def test_keeps_original_on_network_error(self, fake_session):
        session = fake_session({"https://alice.github.io/site": requests.Timeout("slow")})
        url = "https://github.com/alice/site"
        assert resolve_live_url(url, session) == url

    def test_non_github_url_is_not_probed(self, fake_session):
        session = fake_session({})
        assert resolve_live_url("https://site.test/", session) == "https://site.test/"
        session.head.assert_not_called()

    def test_domain_check_raises_no_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert github_pages_candidate("https://github.com/alice/site") == "https://alice.github.io/site"
