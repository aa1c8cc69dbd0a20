import logging
from unittest.mock import MagicMock

import pytest

from oas_viewers.diagnostics import Diagnostics
from oas_viewers.errors import StrictModeError


class TestDiagnostics:
    def test_warning_is_recorded(self):
        diagnostics = Diagnostics()
        warning = diagnostics.warn("UNSUPPORTED_HTTP_AUTH_SCHEME", "digest")
        assert diagnostics.warnings == [warning]
        assert warning.message == "Unsupported HTTP authentication scheme 'digest'"
        assert warning.mitigation

    def test_warning_is_logged_on_injected_logger(self):
        logger = MagicMock(spec=logging.Logger)
        Diagnostics(logger=logger).warn("UNSUPPORTED_SECURITY_SCHEME", "oauth2")
        logger.warning.assert_called_once()

    def test_default_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger="oas_viewers.translation"):
            Diagnostics().warn("UNSUPPORTED_SECURITY_SCHEME", "oauth2")
        assert "oauth2" in caplog.text

    def test_unknown_type_key_uses_culprit(self):
        warning = Diagnostics().warn("SOMETHING_ELSE", "details")
        assert warning.message == "details"
        assert warning.mitigation == ""

    def test_strict_mode_raises(self):
        diagnostics = Diagnostics(strict=True)
        with pytest.raises(StrictModeError) as exc_info:
            diagnostics.warn("UNSUPPORTED_HTTP_AUTH_SCHEME", "digest")
        assert exc_info.value.warning.culprit == "digest"
        assert diagnostics.warnings == []
