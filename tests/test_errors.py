"""Tests for combo.errors — exception hierarchy and error messages."""

import pytest

from combo.errors import (
    ComboError,
    ConfigurationError,
    HTTPError,
    NotConfigured,
    NotFound,
)


class TestHierarchy:
    def test_http_error_is_combo_error(self) -> None:
        assert issubclass(HTTPError, ComboError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_not_configured_is_configuration_error(self) -> None:
        assert issubclass(NotConfigured, ConfigurationError)
        assert issubclass(ConfigurationError, ComboError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request body")
        assert str(err) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_not_found_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"


class TestNotConfigured:
    def test_default_message_names_the_roots(self) -> None:
        message = str(NotConfigured())
        assert "not setup properly" in message
        assert "www_root" in message
        assert "js_root" in message
        assert "css_root" in message

    def test_custom_message(self) -> None:
        assert str(NotConfigured("nope")) == "nope"
