"""Unit tests for user-facing error reporting."""

import pytest

from deployment_tracking.exceptions import CompilerError, UnsupportedStrategyError
from deployment_tracking.reporting import (
    UNSUPPORTED_COMPILER_MESSAGE,
    CliError,
    CompilationError,
    ConfigurationSetError,
    format_error,
)


class TestCompilationError:
    """Test messages for compilation failures."""

    def test_unsupported_strategy_uses_remediation_template(self):
        """Test that unsupported compilers get instructions for passing options."""
        error = CompilationError(UnsupportedStrategyError("solcjs"))

        assert str(error) == UNSUPPORTED_COMPILER_MESSAGE
        assert "--compiler" in str(error)
        assert "options = [" in str(error)

    def test_other_failures_use_cause_description(self):
        """Test that other compiler errors are shown as-is."""
        error = CompilationError(CompilerError("solc exited with status 1"))
        assert str(error) == "solc exited with status 1"


class TestConfigurationSetError:
    """Test messages for configuration failures."""

    def test_prefixes_cause(self):
        """Test that configuration failures are explained with a prefix."""
        error = ConfigurationSetError(TypeError("unsupported value"))
        assert str(error) == "Couldn't set configuration: unsupported value"


class TestCauseChaining:
    """Test that the original error is preserved."""

    @pytest.mark.parametrize(
        "error_class, cause",
        [
            (CompilationError, UnsupportedStrategyError("solcjs")),
            (CompilationError, CompilerError("boom")),
            (ConfigurationSetError, ValueError("bad")),
        ],
    )
    def test_cause_is_preserved(self, error_class, cause):
        """Test that the wrapped error is available as cause and __cause__."""
        error = error_class(cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert isinstance(error, CliError)

    def test_raise_keeps_cause(self):
        """Test that raising the error keeps the chain for tracebacks."""
        cause = CompilerError("boom")

        with pytest.raises(CompilationError) as exc_info:
            raise CompilationError(cause)

        assert exc_info.value.__cause__ is cause


class TestFormatError:
    """Test the format_error function."""

    def test_cli_error_uses_its_message(self):
        """Test that CLI errors render as their own description."""
        error = ConfigurationSetError(ValueError("bad"))
        assert format_error(error) == "Couldn't set configuration: bad"

    def test_plain_error_uses_description(self):
        """Test that other errors fall back to their own description."""
        assert format_error(RuntimeError("disk full")) == "disk full"

    def test_key_error_is_not_quoted(self):
        """Test that KeyError messages are shown without repr quotes."""
        assert format_error(KeyError("result")) == "result"

    def test_empty_message_uses_class_name(self):
        """Test that errors without a message still produce text."""
        assert format_error(KeyError()) == "KeyError"
