"""
Time recombination of two very large chromosomes.

Run from the repository root:

    python -m benchmarks.bench_large_chromosome --loci 10000000 --repeats 5
"""

import argparse
import logging
import time

from src.genedrop.genetics.chromosome import Chromosome, GeneticMap
from src.genedrop.genetics.randomness import RandomSource
from src.genedrop.genetics.recombination import recombine

logger = logging.getLogger(__name__)


def run(n_loci: int, repeats: int, seed: int) -> float:
    """Return mean seconds per recombination over repeats runs."""
    random_source = RandomSource(seed=seed)
    genetic_map = GeneticMap.from_uniform(n_loci, random_source)
    father = Chromosome.from_random(genetic_map, random_source)
    mother = Chromosome.from_random(genetic_map, random_source)
    logger.info("Built %d-locus parents, running %d recombinations", n_loci, repeats)

    start = time.perf_counter()
    for _ in range(repeats):
        recombine(father, mother, random_source)
    return (time.perf_counter() - start) / repeats


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--loci", type=int, default=10_000_000)
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    mean = run(args.loci, args.repeats, args.seed)
    print(f"recombine {args.loci} loci: {mean * 1000:.2f} ms/iter over {args.repeats} runs")


if __name__ == "__main__":
    main()
