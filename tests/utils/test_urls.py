"""Tests for the shared URL helpers."""

import pytest

from factcheck_system.utils.urls import clean_redirect_url


class TestCleanRedirectUrl:
    @pytest.mark.parametrize(
        "url,expected",
        [
            (
                "//duckduckgo.com/l/?uddg=https%3A%2F%2Fvalor.globo.com%2Fdolar&rut=abc",
                "https://valor.globo.com/dolar",
            ),
            (
                "https://duckduckgo.com/l/?uddg=https%3A%2F%2Fg1.globo.com%2Fa",
                "https://g1.globo.com/a",
            ),
            (
                "//duckduckgo.com/l/?uddg=www.bbc.com%2Fportuguese&rut=1",
                "https://www.bbc.com/portuguese",
            ),
        ],
    )
    def test_unwraps_redirects(self, url, expected):
        assert clean_redirect_url(url) == expected

    def test_keeps_target_query_string(self):
        url = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fex.com%2Fs%3Fa%3D1%26b%3D2&rut=x"
        assert clean_redirect_url(url) == "https://ex.com/s?a=1&b=2"

    @pytest.mark.parametrize(
        "url",
        ["https://g1.globo.com/a", "https://duckduckgo.com/?q=dolar", "not a url", ""],
    )
    def test_other_urls_unchanged(self, url):
        assert clean_redirect_url(url) == url
