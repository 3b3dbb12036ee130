"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from repeat_math.arithmetic import InvalidCountError, add, subtract
from repeat_math.core import run_multiplication, trace_multiplication
from repeat_math.models.io import MultiplicationReport, WelcomeMessage

from .base import BaseInterface

# Configure console for better test compatibility
# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)

# Negative operands such as "-2" are positional arguments, not unknown options
_NUMERIC_ARGS = {"ignore_unknown_options": True}


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.app = typer.Typer(
            name="repeat-math",
            help="Multiply integers by repeated addition.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="add", context_settings=_NUMERIC_ARGS)(self.add)
        self.app.command(name="subtract", context_settings=_NUMERIC_ARGS)(
            self.subtract,
        )
        self.app.command(name="multiply", context_settings=_NUMERIC_ARGS)(
            self.multiply,
        )

        # Show the welcome message when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def add(
        self,
        x: Annotated[int, typer.Argument(help="First operand.")],
        y: Annotated[int, typer.Argument(help="Second operand.")],
    ) -> None:
        """Print the sum of two integers."""
        self.logger.debug("Adding", x=x, y=y)
        console.print(add(x, y))
        console.file.flush()

    def subtract(
        self,
        x: Annotated[int, typer.Argument(help="Value to subtract from.")],
        y: Annotated[int, typer.Argument(help="Value to subtract.")],
    ) -> None:
        """Print the difference of two integers."""
        self.logger.debug("Subtracting", x=x, y=y)
        console.print(subtract(x, y))
        console.file.flush()

    def multiply(
        self,
        multiplicand: Annotated[
            int,
            typer.Argument(help="Value added to itself at every step."),
        ],
        count: Annotated[
            int,
            typer.Argument(help="Number of times the multiplicand is added."),
        ],
        base: Annotated[
            int | None,
            typer.Option(
                "--base",
                "-b",
                help="Override the addend carried across steps.",
            ),
        ] = None,
        trace: Annotated[
            bool,
            typer.Option(
                "--trace",
                help="Show every accumulation step as a table.",
                is_flag=True,
            ),
        ] = False,
        json_output: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Render the multiplication report as JSON.",
                is_flag=True,
            ),
        ] = False,
    ) -> None:
        """Multiply two integers by repeated addition."""
        self.logger.info(
            "Running multiplication",
            multiplicand=multiplicand,
            count=count,
            base=base,
        )

        try:
            report = run_multiplication(multiplicand, count, base)
        except InvalidCountError as exc:
            self.logger.error("Invalid multiplier count", error=str(exc))
            console.print(f"[red]{exc}[/red]")
            console.file.flush()
            raise typer.Exit(1) from exc

        if json_output:
            console.print_json(data=report.model_dump())
            console.file.flush()
            return

        if trace:
            self._print_trace(report)

        if report.zero_count_quirk and not report.corrected:
            console.print(
                "[yellow]A count of 0 returns the multiplicand unchanged.[/yellow]",
            )
        console.print(report.product)
        console.file.flush()

    def _print_trace(self, report: MultiplicationReport) -> None:
        """Render the accumulation steps as a table.

        A corrected zero-count result gets a final row so the table ends on
        the reported product.

        """
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Step", justify="right")
        table.add_column("Remaining", justify="right")
        table.add_column("Accumulator", justify="right")

        table.add_row("0", str(report.count), str(report.multiplicand))
        for index, step in enumerate(
            trace_multiplication(report.multiplicand, report.count, report.base),
            start=1,
        ):
            table.add_row(str(index), str(step.remaining), str(step.accumulator))
        if report.corrected:
            table.add_row("corrected", str(report.count), str(report.product))

        console.print(table)

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()
