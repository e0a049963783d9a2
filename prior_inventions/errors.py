"""Exceptions raised while building the prior inventions document."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .projects.validation import ProjectViolation


class PriorInventionsError(Exception):
    """Base class for all fatal errors of a generation run."""


class ConfigurationError(PriorInventionsError):
    """Configuration is missing, malformed or inconsistent."""


class DataIntegrityError(PriorInventionsError):
    """Source data breaks an invariant the pipeline relies on."""


class ValidationError(PriorInventionsError):
    """One or more projects are missing required fields.

    Attributes:
        violations: Every offending project with the fields it lacks
    """

    def __init__(self, violations: list["ProjectViolation"]):
        self.violations = violations
        details = "\n\n  ".join(violation.describe() for violation in violations)
        super().__init__(
            "Some projects are missing required fields. Please set values for "
            "these fields via the github.repoOverrides configuration field.\n\n"
            f"Missing data:\n  {details}"
        )
