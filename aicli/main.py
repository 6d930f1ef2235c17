import logging
import sys

from .cli import run_cli

logger = logging.getLogger(__name__)


def main():
    """Console entry point for ``aicli``; exits with the code returned by the CLI."""
    try:
        exit_code = run_cli()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        logger.exception(f"aicli failed: {str(e)}")
        print(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
