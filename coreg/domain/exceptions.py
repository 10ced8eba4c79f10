"""
Domain exceptions - Semantic error types for the co-registration client.

Transport failures (network, authentication, remote validation) are raised
by the injected API client and are deliberately not wrapped here.
"""


class CoRegError(Exception):
    """Base class for co-registration client errors."""

    pass


class LookupTermTooShort(CoRegError):
    """Zip/city lookup term is shorter than the enforced minimum."""

    def __init__(self, term: str, min_length: int) -> None:
        super().__init__(f"Lookup term {term!r} is shorter than {min_length} characters")
        self.term = term
        self.min_length = min_length
