"""doxygen-task - Doxygen documentation step for build pipelines.

Resolves task inputs, renders or patches a Doxyfile, runs doxygen and
publishes the output directory as a pipeline artifact.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
