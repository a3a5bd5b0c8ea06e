"""
Crossover simulation between two homologous chromosomes.

The walk starts on a strand picked by a fair coin, copies loci from it, and at
each gap between locus i and i + 1 switches strand with probability map[i].
Alleles between two crossovers are therefore inherited as one unbroken block.

The walk is evaluated in one pass over numpy arrays: the gap draws become a
boolean crossover mask, whose running parity says which strand each locus
comes from.
"""

import logging
from typing import Optional

import numpy

from ..errors import IncompatibleMapsError
from .chromosome import Chromosome, GeneticMap
from .randomness import RandomSource, resolve_random_source

logger = logging.getLogger(__name__)


def draw_crossovers(genetic_map: GeneticMap, random_source: RandomSource) -> numpy.ndarray:
    """
    Decide at which gaps a crossover happens.

    Args:
        genetic_map: Map providing one recombination probability per gap
        random_source: Source of one uniform draw per gap

    Returns:
        Boolean array, True at gap i when the strand switches between locus i and i + 1
    """
    return random_source.uniform(len(genetic_map)) < genetic_map.distances


def strand_parity(crossovers: numpy.ndarray) -> numpy.ndarray:
    """
    Per-locus flag telling whether the walk sits on the opposite strand from where it began.

    Locus 0 is always on the starting strand; every crossover before a locus
    flips it once.
    """
    parity = numpy.zeros(len(crossovers) + 1, dtype=bool)
    parity[1:] = numpy.cumsum(crossovers) % 2 == 1
    return parity


def recombine(
    parent_a: Chromosome,
    parent_b: Chromosome,
    random_source: Optional[RandomSource] = None,
) -> Chromosome:
    """
    Produce one recombinant chromosome from two homologous chromosomes.

    Consumes one coin flip (heads starts on parent_a) and one uniform draw per
    gap from random_source.

    Args:
        parent_a: First chromosome to draw loci from
        parent_b: Second chromosome to draw loci from
        random_source: Randomness to use. None uses a fresh unseeded source.

    Returns:
        New chromosome over the shared map whose every locus comes from parent_a
        or parent_b at the same position

    Raises:
        IncompatibleMapsError: If the parents are not built over the same map
            object

    Example::

        genetic_map = GeneticMap([0.5, 0.1, 0.05])
        father = Chromosome(genetic_map)
        father.set_loci([1, 1, 1, 0])
        mother = Chromosome(genetic_map)
        mother.set_loci([1, 0, 1, 1])
        child = recombine(father, mother, RandomSource(seed=7))
    """
    if parent_a.map is not parent_b.map:
        raise IncompatibleMapsError("Chromosomes with different maps cannot be recombined.")

    random_source = resolve_random_source(random_source)
    genetic_map = parent_a.map

    start_on_a = random_source.coin()
    crossovers = draw_crossovers(genetic_map, random_source)
    from_a = strand_parity(crossovers) != start_on_a

    child = Chromosome(genetic_map)
    child.set_loci(numpy.where(from_a, parent_a.loci, parent_b.loci))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Recombined %d loci starting on %s strand with %d crossovers",
            len(child),
            "first" if start_on_a else "second",
            int(crossovers.sum()),
        )
    return child
