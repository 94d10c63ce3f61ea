"""
Tests for configuration loading
"""

from ledger_core import config as config_module
from ledger_core.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:

    def test_defaults(self, monkeypatch):
        for name in ("LEDGER_LOG_LEVEL", "LEDGER_FIRST_ACCOUNT_NUMBER", "LEDGER_FIRST_CUSTOMER_ID"):
            monkeypatch.delenv(name, raising=False)
        config = LedgerConfig(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.log_file is None
        assert config.first_customer_id == 1
        assert config.first_account_number == 1001
        assert config.currency_code == "BRL"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LEDGER_FIRST_ACCOUNT_NUMBER", "5000")
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")
        config = LedgerConfig(_env_file=None)

        assert config.first_account_number == 5000
        assert config.log_level == "DEBUG"

    def test_reload_config(self, monkeypatch):
        original = get_config()
        try:
            monkeypatch.setenv("LEDGER_FIRST_CUSTOMER_ID", "42")
            reloaded = reload_config()

            assert reloaded.first_customer_id == 42
            assert get_config() is reloaded
        finally:
            config_module.config = original
