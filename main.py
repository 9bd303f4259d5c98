"""
The main module for the context engine.

This module configures root logging and hands the command line over to the
ContextEngine CLI. It serves as the entry point for the application.

Children modules:
- ContextEngine/context.py: Defines the subcommands.
- ContextEngine/core/*: Contains the extraction operations.

"""
import logging
import sys
# local imports
from ContextEngine.context import context_main

# logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ====== Execute ContextEngine =====
def main() -> int:
    logger.debug("Running ContextEngine...")

    status = context_main()

    logger.debug("ContextEngine run complete.")
    return status


if __name__ == "__main__":
    sys.exit(main())
