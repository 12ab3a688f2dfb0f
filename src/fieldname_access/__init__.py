"""Name-indexed field accessor planning for record types."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
