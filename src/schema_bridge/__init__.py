"""Schema-driven marshalling between live object graphs and JSON."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
