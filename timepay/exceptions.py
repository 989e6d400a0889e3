"""Domain errors raised by the attendance and payroll services.

Field-level input problems use ``django.core.exceptions.ValidationError``;
the classes here cover workflow and locking failures.
"""


class TimepayError(Exception):
    """Base class for domain errors."""


class StateError(TimepayError):
    """A payroll run transition is not allowed from its current status."""


class LockConflict(TimepayError):
    """An attendance day record is locked by an approved payroll run."""


class ComputationFailure(TimepayError):
    """Payslip generation failed; the run was reset to DRAFT."""
