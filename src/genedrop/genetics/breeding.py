"""
Breeding of two individuals into a child.

For every chromosome number the father contributes one gamete and the mother
one, and the pair becomes the child's homology in that order. Parents are not
checked against each other for chromosome number or maps up front: differing
maps surface as IncompatibleMapsError chained inside a BreedingError, and a
mother with fewer chromosomes than the father surfaces as IndexError.
"""

import logging
from typing import Optional

from ..errors import (
    BreedingError,
    GenedropError,
    NoGenotypeDataError,
    PloidyMismatchError,
    UnsupportedPloidyError,
)
from .individual import Individual
from .randomness import RandomSource, resolve_random_source

logger = logging.getLogger(__name__)


def breed(
    father: Individual,
    mother: Individual,
    random_source: Optional[RandomSource] = None,
) -> Individual:
    """
    Breed two individuals of equal ploidy into a new individual.

    Args:
        father: Individual contributing the first chromosome of each homology
        mother: Individual contributing the second chromosome of each homology
        random_source: Randomness shared by every gamete of this breeding. None
            uses a fresh unseeded source.

    Returns:
        Child with a new UUID and one homology per chromosome number of the father

    Raises:
        NoGenotypeDataError: If either parent has no genotype data
        PloidyMismatchError: If the parents' ploidies differ
        UnsupportedPloidyError: If the ploidy is above 2
        BreedingError: If producing a gamete fails, raised from the underlying error
    """
    try:
        father_ploidy = father.ploidy()
    except NoGenotypeDataError as exc:
        raise NoGenotypeDataError("Error determining father ploidy") from exc

    try:
        mother_ploidy = mother.ploidy()
    except NoGenotypeDataError as exc:
        raise NoGenotypeDataError("Error determining mother ploidy") from exc

    if father_ploidy != mother_ploidy:
        raise PloidyMismatchError(father_ploidy, mother_ploidy)

    # TODO: choosing which copies pair up at ploidy above 2 needs a pairing rule
    if father_ploidy > 2:
        raise UnsupportedPloidyError(
            "Breeding not implemented for ploidies above 2.", ploidy=father_ploidy
        )

    random_source = resolve_random_source(random_source)
    child = Individual()

    for chromosome_number in range(father.chromosome_number()):
        try:
            father_gamete = father.get_gamete(chromosome_number, random_source)
        except GenedropError as exc:
            raise BreedingError("father", chromosome_number) from exc

        try:
            mother_gamete = mother.get_gamete(chromosome_number, random_source)
        except GenedropError as exc:
            raise BreedingError("mother", chromosome_number) from exc

        child.homologies.append([father_gamete, mother_gamete])

    logger.debug(
        "Bred %s x %s into %s over %d chromosomes",
        father.uuid,
        mother.uuid,
        child.uuid,
        len(child.homologies),
    )
    return child
