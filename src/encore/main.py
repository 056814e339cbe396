"""
Encore - SoundCloud artwork resolver
Main entry point for the application.
"""

import sys

from .core import setup_logging
from .core.validation import validate_and_raise
from .ui.cli import EncoreCLI

logger = setup_logging()


def main(args=None):
    """Main entry point."""
    logger.debug("Starting Encore")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise
        
        cli = EncoreCLI()
        return cli.run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    sys.exit(main())
