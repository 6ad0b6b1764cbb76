"""Unit tests for AppError hierarchy."""

import httpx

from errors import AppError, ConfigurationError


class TestAppErrorSubclasses:
    def test_configuration_error(self):
        e = ConfigurationError("missing credentials")
        assert isinstance(e, AppError)
        assert e.error_code == "configuration_error"
        assert e.message == "missing credentials"
        assert str(e) == "missing credentials"

    def test_base_error_code(self):
        assert AppError("boom").error_code == "internal_error"

    def test_field_names_the_setting(self):
        assert ConfigurationError("missing", field="password").field == "password"

    def test_field_defaults_to_none(self):
        assert ConfigurationError("missing").field is None

    def test_not_a_transport_error(self):
        assert not issubclass(ConfigurationError, httpx.HTTPError)
