"""
Exception taxonomy for genedrop.

Every failure in the library is a precondition violation, never a transient
fault, so nothing here is retried. Callers that add context re-raise with
``raise ... from exc`` so the original condition stays reachable through
``__cause__``; format_error_chain renders that trail for display.
"""

from typing import List, Optional


class GenedropError(Exception):
    """Root of every condition raised by genedrop."""


class LengthMismatchError(GenedropError, ValueError):
    """Loci assignment length disagrees with the length implied by the genetic map."""

    def __init__(self, received: int, expected: int):
        self.received = received
        self.expected = expected
        super().__init__(f"Cannot assign loci of size {received}. Map expects {expected}.")


class IncompatibleMapsError(GenedropError, ValueError):
    """Chromosomes bound to different GeneticMap instances were combined."""


class NoGenotypeDataError(GenedropError, ValueError):
    """Ploidy or chromosome number queried on an individual with no homologies."""


class PloidyMismatchError(GenedropError, ValueError):
    """Breeding attempted between individuals of different ploidy."""

    def __init__(self, father_ploidy: int, mother_ploidy: int):
        self.father_ploidy = father_ploidy
        self.mother_ploidy = mother_ploidy
        super().__init__(
            f"Cannot breed organisms of different ploidies. "
            f"Father has ploidy {father_ploidy} and mother {mother_ploidy}."
        )


class UnsupportedPloidyError(GenedropError, NotImplementedError):
    """Gamete production or breeding requested at a ploidy other than diploid."""

    def __init__(self, message: str, ploidy: Optional[int] = None):
        self.ploidy = ploidy
        super().__init__(message)


class BreedingError(GenedropError):
    """
    Gamete production failed part way through breeding.

    Raised from the underlying condition. Records which parent and which
    chromosome number failed.
    """

    def __init__(self, parent: str, chromosome_number: int):
        self.parent = parent
        self.chromosome_number = chromosome_number
        super().__init__(
            f"Error generating {parent} gamete for chromosome number {chromosome_number}"
        )


def error_chain(exc: BaseException) -> List[BaseException]:
    """Return exc followed by each explicit cause, outermost first."""
    chain = [exc]
    while chain[-1].__cause__ is not None:
        chain.append(chain[-1].__cause__)
    return chain


def format_error_chain(exc: BaseException) -> str:
    """
    Render an exception and its causes as a readable trail.

    Example::

        Error generating father gamete for chromosome number 3
        Caused by: Chromosomes with different maps cannot be recombined.
    """
    lines = []
    for depth, error in enumerate(error_chain(exc)):
        prefix = "" if depth == 0 else "Caused by: "
        lines.append(f"{prefix}{error}")
    return "\n".join(lines)
