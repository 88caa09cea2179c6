"""Domain-level exceptions.

Rule violations are *not* exceptions: they are returned as DriverError
values. These exceptions signal misuse of the domain API (invalid rule
configuration, naive timestamps, a reused builder) so the CLI layer can
catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A domain object was constructed or used with invalid arguments."""
