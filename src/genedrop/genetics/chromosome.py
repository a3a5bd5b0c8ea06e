"""
Genetic maps and the chromosomes laid out over them.

A GeneticMap holds the recombination probability of every gap between adjacent
loci, so a map of L distances describes a chromosome of L + 1 loci. Maps are
immutable and compared by identity: chromosomes are compatible only when they
were built over the very same map object, even if another map holds identical
numbers.
"""

import operator
from typing import Iterator, Sequence

import numpy

from ..errors import LengthMismatchError
from .randomness import RandomSource


LOCUS_DTYPE = numpy.int64
DISTANCE_DTYPE = numpy.float64


class GeneticMap:
    """
    Ordered inter-locus recombination probabilities.

    Distances are conventionally in [0, 0.5] but are not validated; callers
    supply sane probabilities. Equality is identity, so two maps built from the
    same numbers are still different maps.
    """

    def __init__(self, distances: Sequence[float]):
        """
        Args:
            distances: Probability of a crossover between locus i and i + 1,
                one entry per gap.

        Raises:
            ValueError: If distances is not one-dimensional
        """
        array = numpy.array(distances, dtype=DISTANCE_DTYPE)
        if array.ndim != 1:
            raise ValueError(f"Genetic map must be one-dimensional, got shape {array.shape}")
        array.flags.writeable = False
        self._distances = array

    @classmethod
    def from_uniform(
        cls,
        n_loci: int,
        random_source: RandomSource,
        max_distance: float = 0.5,
    ) -> "GeneticMap":
        """
        Build a map for n_loci loci with distances drawn uniformly from [0, max_distance].

        Raises:
            ValueError: If n_loci is less than 1
        """
        if n_loci < 1:
            raise ValueError("A chromosome needs at least one locus")
        return cls(random_source.generator.uniform(0.0, max_distance, n_loci - 1))

    @property
    def distances(self) -> numpy.ndarray:
        """Read-only array of recombination probabilities."""
        return self._distances

    @property
    def n_loci(self) -> int:
        """Number of loci on a chromosome built over this map."""
        return len(self._distances) + 1

    def __len__(self) -> int:
        return len(self._distances)

    def __getitem__(self, index: int) -> float:
        return float(self._distances[index])

    def __iter__(self) -> Iterator[float]:
        return (float(distance) for distance in self._distances)

    def __repr__(self) -> str:
        return f"GeneticMap(n_distances={len(self)}, id={id(self):#x})"


class Chromosome:
    """
    Allele values at every locus of a GeneticMap.

    Holds a reference to its map, never a copy; many chromosomes share one map.
    The loci array always has exactly map.n_loci entries. Item access is bounded
    to [0, len) and anything outside raises IndexError.
    """

    def __init__(self, genetic_map: GeneticMap):
        """
        Create a chromosome over genetic_map with every locus set to zero.

        Args:
            genetic_map: Map this chromosome is laid out over. Shared, not copied.
        """
        self._map = genetic_map
        self._loci = numpy.zeros(genetic_map.n_loci, dtype=LOCUS_DTYPE)

    @classmethod
    def from_random(
        cls,
        genetic_map: GeneticMap,
        random_source: RandomSource,
        n_alleles: int = 5,
    ) -> "Chromosome":
        """Chromosome with alleles drawn uniformly from [0, n_alleles)."""
        chromosome = cls(genetic_map)
        chromosome.set_loci(
            random_source.generator.integers(0, n_alleles, genetic_map.n_loci, dtype=LOCUS_DTYPE)
        )
        return chromosome

    @property
    def map(self) -> GeneticMap:
        return self._map

    @property
    def loci(self) -> numpy.ndarray:
        """Read-only view of the allele values."""
        view = self._loci.view()
        view.flags.writeable = False
        return view

    def set_loci(self, values: Sequence[int]) -> None:
        """
        Replace every allele value at once.

        Args:
            values: One allele per locus; must have map.n_loci entries.

        Raises:
            LengthMismatchError: If the length disagrees with the map. The
                chromosome is left unchanged.
            TypeError: If the values are not integers, e.g. floats. Alleles
                are never rounded or truncated.
        """
        array = numpy.asarray(values)
        if array.ndim != 1 or len(array) != self._map.n_loci:
            received = len(array) if array.ndim == 1 else array.size
            raise LengthMismatchError(received, self._map.n_loci)
        if array.dtype.kind not in "iu":
            raise TypeError(f"Alleles must be integers, got dtype {array.dtype}")
        self._loci = array.astype(LOCUS_DTYPE)

    def is_empty(self) -> bool:
        """True when the map has no gaps, i.e. the chromosome is a single locus."""
        return len(self._map) == 0

    def copy(self) -> "Chromosome":
        """Independent copy of the alleles, bound to the same map."""
        clone = Chromosome(self._map)
        clone._loci = self._loci.copy()
        return clone

    def _check_index(self, index: int) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self):
            raise IndexError(f"Locus {position} out of range for chromosome of length {len(self)}")
        return position

    def __len__(self) -> int:
        return self._map.n_loci

    def __getitem__(self, index: int) -> int:
        return int(self._loci[self._check_index(index)])

    def __setitem__(self, index: int, value: int) -> None:
        self._loci[self._check_index(index)] = operator.index(value)

    def __iter__(self) -> Iterator[int]:
        return (int(locus) for locus in self._loci)

    def __repr__(self) -> str:
        return f"Chromosome(n_loci={len(self)}, map={self._map!r})"
