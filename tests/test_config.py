"""Tests for process-wide default configuration."""

import pytest

from clicky_sdk import ClickyClient, ClickyConfigError, configure, configure_replace, get_config


class TestDefaultConfig:
    def test_configure_replace_overwrites_configuration(self) -> None:
        configure_replace({"foo": 1, "bar": 2})
        configure_replace({"baz": 3})
        assert get_config() == {"baz": 3}

    def test_configure_merges_configuration(self) -> None:
        configure_replace({"foo": 1, "bar": 2})
        configure({"foo": 2})
        assert get_config() == {"foo": 2, "bar": 2}

    def test_get_config_returns_copy(self) -> None:
        configure_replace({"foo": 1})
        get_config()["foo"] = 99
        assert get_config() == {"foo": 1}

    def test_configure_replace_copies_input(self) -> None:
        options = {"foo": 1}
        configure_replace(options)
        options["foo"] = 2
        assert get_config() == {"foo": 1}

    @pytest.mark.parametrize("bad", [1, "site_id=1", [("site_id", 1)], None])
    def test_non_mapping_raises(self, bad: object) -> None:
        with pytest.raises(ClickyConfigError):
            configure(bad)  # type: ignore[arg-type]
        with pytest.raises(ClickyConfigError):
            configure_replace(bad)  # type: ignore[arg-type]


class TestClientConfig:
    def test_instance_config_is_merged(self) -> None:
        configure_replace({"foo": 100, "bar": 200})
        with ClickyClient({"foo": 200}) as client:
            assert client.effective_config == {"foo": 200, "bar": 200}

    def test_later_default_changes_do_not_affect_client(self) -> None:
        configure_replace({"site_id": 1, "sitekey": "abc"})
        with ClickyClient() as client:
            configure({"site_id": 2})
            configure_replace({})
            assert client.effective_config == {"site_id": 1, "sitekey": "abc"}

    def test_non_mapping_instance_config_raises(self) -> None:
        with pytest.raises(ClickyConfigError):
            ClickyClient(1)  # type: ignore[arg-type]
