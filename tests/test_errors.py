"""Tests for tern.errors — exception hierarchy."""

from tern.errors import ConfigurationError, StoreError, TernError


class TestHierarchy:
    def test_base_is_exception(self) -> None:
        assert issubclass(TernError, Exception)

    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, TernError)

    def test_store_error(self) -> None:
        assert issubclass(StoreError, TernError)

    def test_lazy_top_level_exports(self) -> None:
        import tern

        assert tern.TernError is TernError
        assert tern.ConfigurationError is ConfigurationError
