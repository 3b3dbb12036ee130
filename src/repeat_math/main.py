"""Entry point for the Repeat Math command line application."""

from repeat_math.interfaces.cli import CLIInterface
from repeat_math.utils.logger import configure_logging
from repeat_math.utils.settings import get_settings


def main() -> None:
    """Configure logging and run the CLI."""
    configure_logging(get_settings())
    CLIInterface().run()


if __name__ == "__main__":
    main()
