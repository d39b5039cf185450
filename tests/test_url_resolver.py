"""
Unit tests for URL resolution.
"""

import pytest

from login_sentry.url_resolver import InvalidURLError, resolve_url


class TestResolveUrl:

    def test_host_port_and_path(self):
        assert resolve_url("http://host.example.com:8080/logs/a.txt") == \
            ("host.example.com", "8080", "/logs/a.txt")

    def test_default_port(self):
        assert resolve_url("http://host.example.com/a.txt") == ("host.example.com", "80", "/a.txt")

    def test_default_path(self):
        assert resolve_url("http://host.example.com") == ("host.example.com", "80", "/")

    def test_port_without_path(self):
        assert resolve_url("http://host.example.com:8080") == ("host.example.com", "8080", "/")

    def test_colon_in_path_is_not_a_port(self):
        assert resolve_url("http://host.example.com/logs/10:00.txt") == \
            ("host.example.com", "80", "/logs/10:00.txt")

    def test_query_is_part_of_path(self):
        assert resolve_url("http://logs.local/auth.log?day=1") == ("logs.local", "80", "/auth.log?day=1")

    def test_scheme_is_not_checked(self):
        assert resolve_url("//logs.local/auth.log") == ("logs.local", "80", "/auth.log")


class TestMalformedUrls:

    def test_missing_separator(self):
        with pytest.raises(InvalidURLError):
            resolve_url("host.example.com/a.txt")

    def test_missing_host(self):
        with pytest.raises(InvalidURLError):
            resolve_url("http:///a.txt")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_url("not a url")
