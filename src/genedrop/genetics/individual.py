"""
Individual: the genotype of one organism.

An individual is an identifier plus one homology per chromosome number. A
homology holds the alternate copies of one chromosome, so its size is the
ploidy. Founders are built by adding homologies directly; derived individuals
come out of breeding.
"""

import operator
from typing import List, Optional, Sequence
from uuid import UUID, uuid4

from ..errors import IncompatibleMapsError, NoGenotypeDataError, UnsupportedPloidyError
from .chromosome import Chromosome
from .randomness import RandomSource, resolve_random_source
from .recombination import recombine


Homology = List[Chromosome]


class Individual:
    """
    Collection of homologous chromosome sets with a unique identifier.

    Ploidy is read from the first homology. Uniform ploidy across homologies is
    not enforced on assembly; get_gamete checks the homology it recombines.
    """

    def __init__(
        self,
        homologies: Optional[List[Homology]] = None,
        uuid: Optional[UUID] = None,
    ):
        """
        Args:
            homologies: Homologies in chromosome-number order. If None, empty.
            uuid: Unique identifier. If None, generates new UUID.
        """
        self._uuid = uuid if uuid is not None else uuid4()
        self.homologies: List[Homology] = list(homologies) if homologies is not None else []

    @property
    def uuid(self) -> UUID:
        """Unique immutable identifier for this individual."""
        return self._uuid

    def add_homology(self, chromosomes: Sequence[Chromosome]) -> None:
        """
        Append the copies of the next chromosome number.

        Raises:
            IncompatibleMapsError: If the chromosomes are not all built over the
                same map
        """
        homology = list(chromosomes)
        if any(chromosome.map is not homology[0].map for chromosome in homology[1:]):
            raise IncompatibleMapsError(
                f"Chromosomes of homology {len(self.homologies)} must share one genetic map."
            )
        self.homologies.append(homology)

    def ploidy(self) -> int:
        """
        Number of chromosome copies in the first homology.

        Raises:
            NoGenotypeDataError: If there are no homologies or the first is empty
        """
        if not self.homologies or not self.homologies[0]:
            raise NoGenotypeDataError("Cannot determine ploidy, no genotype data.")
        return len(self.homologies[0])

    def chromosome_number(self) -> int:
        """
        Number of homologies.

        Raises:
            NoGenotypeDataError: If there are no homologies
        """
        if not self.homologies:
            raise NoGenotypeDataError("Cannot determine number of chromosomes, no genotype data.")
        return len(self.homologies)

    def get_gamete(
        self,
        chromosome_index: int,
        random_source: Optional[RandomSource] = None,
    ) -> Chromosome:
        """
        Recombine the two copies of one chromosome number into a gamete.

        Args:
            chromosome_index: Chromosome number to produce the gamete for
            random_source: Randomness to use. None uses a fresh unseeded source.

        Raises:
            NoGenotypeDataError: If ploidy cannot be determined
            UnsupportedPloidyError: If the individual, or the requested
                homology, is not diploid
            IncompatibleMapsError: If the two copies use different maps
            IndexError: If chromosome_index is outside [0, chromosome_number())
        """
        try:
            ploidy = self.ploidy()
        except NoGenotypeDataError as exc:
            raise NoGenotypeDataError("Error determining ploidy for gamete generation") from exc

        if ploidy != 2:
            raise UnsupportedPloidyError(
                "Gamete production only implemented for diploids.", ploidy=ploidy
            )

        position = operator.index(chromosome_index)
        if not 0 <= position < len(self.homologies):
            raise IndexError(
                f"Chromosome number {position} out of range for {len(self.homologies)} homologies"
            )

        # ploidy() only inspects the first homology
        homology = self.homologies[position]
        if len(homology) != 2:
            raise UnsupportedPloidyError(
                f"Homology {position} has {len(homology)} copies; gamete production "
                f"only implemented for diploids.",
                ploidy=len(homology),
            )

        return recombine(homology[0], homology[1], random_source)

    def gametes(self, random_source: Optional[RandomSource] = None) -> List[Chromosome]:
        """One gamete per chromosome number, in order."""
        random_source = resolve_random_source(random_source)
        return [
            self.get_gamete(index, random_source)
            for index in range(self.chromosome_number())
        ]

    def __repr__(self) -> str:
        return f"Individual(uuid={self._uuid}, n_homologies={len(self.homologies)})"
