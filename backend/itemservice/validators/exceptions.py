"""Errors that abort a validation call.

Rule violations are never raised; they go into the report. These signal a
broken rule setup and must reach the caller.
"""


class ConstraintConfigurationError(Exception):
    """A rule, check, or target shape the engine cannot honour."""
