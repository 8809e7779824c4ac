# tests/test_app.py
"""
Application Tests - Demonstration Entry Point

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- paybridge.app (main entry point for testing)
- unittest.mock (patch for logging setup and backend)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Patching logging setup and handlers

from paybridge.adapters.payments.legacy import ConsoleLegacyPaymentSystem
from paybridge.app import main
from paybridge.domain.errors import LegacyBackendError


class TestMain:
    @patch('paybridge.app.setup_logging')
    def test_runs_both_payments(self, mock_setup_logging, capsys):
        main()

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Payment executed by the modern system in the amount of: 150.00",
            "Legacy system executing payment of: 200.00",
        ]
        mock_setup_logging.assert_called_once()

    @patch('paybridge.app.setup_logging')
    def test_legacy_failure_is_not_caught(self, mock_setup_logging, capsys):
        offline = ConsoleLegacyPaymentSystem(name="ledger", online=False, output=Mock())
        with patch('paybridge.app.ConsoleLegacyPaymentSystem', return_value=offline):
            with pytest.raises(LegacyBackendError):
                main()

        # modern payment already ran before the failure
        assert "modern system" in capsys.readouterr().out
