"""Module for common code."""
import logging

LOG = logging.getLogger("red.dronefly.taxonstats")
