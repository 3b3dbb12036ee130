"""Tests for CLI interface implementation."""

from unittest.mock import MagicMock, patch

import pytest
import typer

from repeat_math.arithmetic import InvalidCountError
from repeat_math.interfaces.base import BaseInterface
from repeat_math.interfaces.cli import CLIInterface
from repeat_math.models.io import MultiplicationReport


class TestCLIInterface:
    """Test CLI interface functionality."""

    def test_cli_interface_inherits_base(self) -> None:
        """Test that CLIInterface inherits from BaseInterface."""
        assert issubclass(CLIInterface, BaseInterface)

    def test_cli_interface_has_name(self) -> None:
        """Test that CLIInterface has correct name."""
        cli = CLIInterface()
        assert cli.name == "CLI"

    def test_cli_interface_has_typer_app(self) -> None:
        """Test that CLIInterface has Typer app."""
        cli = CLIInterface()
        assert isinstance(cli.app, typer.Typer)

    def test_cli_welcome_command(self) -> None:
        """Test CLI welcome command functionality."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.welcome()

            assert mock_console.print.call_count == 2
            first_call = mock_console.print.call_args_list[0][0]
            assert "Welcome to Repeat Math!" in str(first_call)
            second_call = mock_console.print.call_args_list[1][0]
            assert "Type --help for more information" in str(second_call)

    def test_cli_run_method(self) -> None:
        """Test CLI run method executes typer app."""
        cli = CLIInterface()
        cli.app = MagicMock()

        cli.run()

        cli.app.assert_called_once()

    def test_cli_add_and_subtract(self) -> None:
        """The primitive commands print their results."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.add(2, 3)
            cli.subtract(2, 3)

        printed = [call.args[0] for call in mock_console.print.call_args_list]
        assert printed == [5, -1]

    def test_cli_multiply_prints_product(self) -> None:
        """The multiply command prints the product."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.multiply(4, 10)

        mock_console.print.assert_called_once_with(40)

    def test_cli_multiply_warns_on_zero_count(self) -> None:
        """A zero count prints a notice before the echoed multiplicand."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.multiply(7, 0)

        assert mock_console.print.call_count == 2
        assert "count of 0" in str(mock_console.print.call_args_list[0])
        assert mock_console.print.call_args_list[1].args[0] == 7

    def test_cli_multiply_json_output(self) -> None:
        """The --json flag renders the report."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.multiply(2, 5, json_output=True)

        payload = mock_console.print_json.call_args.kwargs["data"]
        assert MultiplicationReport(**payload).product == 10
        mock_console.print.assert_not_called()

    def test_cli_multiply_trace_prints_table(self) -> None:
        """The --trace flag prints a table before the product."""
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.multiply(3, 3, trace=True)

        table = mock_console.print.call_args_list[0].args[0]
        assert table.row_count == 3
        assert mock_console.print.call_args_list[-1].args[0] == 9

    def test_cli_multiply_exits_on_invalid_count(self) -> None:
        """Invalid counts exit with status 1."""
        cli = CLIInterface()

        with (
            patch("repeat_math.interfaces.cli.console") as mock_console,
            patch("repeat_math.interfaces.cli.run_multiplication") as mock_run,
        ):
            mock_run.side_effect = InvalidCountError(-1)

            with pytest.raises(typer.Exit) as exc_info:
                cli.multiply(3, -1)

            mock_console.print.assert_called_once()

        assert exc_info.value.exit_code == 1

    def test_cli_multiply_trace_ends_on_corrected_product(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A corrected zero count adds a final row matching the printed product."""
        monkeypatch.setenv("REPEAT_MATH_ZERO_COUNT_RETURNS_ZERO", "true")
        cli = CLIInterface()

        with patch("repeat_math.interfaces.cli.console") as mock_console:
            cli.multiply(9, 0, trace=True)

        table = mock_console.print.call_args_list[0].args[0]
        assert table.row_count == 2
        assert list(table.columns[0].cells)[-1] == "corrected"
        assert list(table.columns[2].cells)[-1] == "0"
        assert mock_console.print.call_args_list[-1].args[0] == 0

    def test_cli_multiply_logs_invalid_count_once(self) -> None:
        """A rejected count produces a single error log event."""
        cli = CLIInterface()
        cli.logger = MagicMock()

        with (
            patch("repeat_math.interfaces.cli.console"),
            patch("repeat_math.core.logger") as mock_core_logger,
            pytest.raises(typer.Exit),
        ):
            cli.multiply(3, -2)

        cli.logger.error.assert_called_once()
        mock_core_logger.error.assert_not_called()
