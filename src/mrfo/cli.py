"""
mrfo command line driver.

    $ mrfo -f configs/main.yaml
    $ mrfo -N 30 -d 2 -T 200 -L -10.0 -U 10.0 --verbose
"""
from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional
import numpy as np
from .algorithms.mrfo import MRFO
from .core.config import ConfigError, load_config, make_config
from .core.fitness import FUNCTIONS, get_function

logger = logging.getLogger("mrfo")

# used when neither --seed nor the config file sets one
DEFAULT_SEED = 1412478894

DESCRIPTION = """\
Manta Ray Foraging Optimization (MRFO)

MRFO is a bio-inspired metaheuristic that mimics the chain, cyclone and
somersault foraging behaviors of manta rays to balance exploration and
exploitation in global optimization problems.
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mrfo", description=DESCRIPTION,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("-f", "--file", help="YAML/JSON parameter file; overrides the options below")
    ap.add_argument("-N", "--populationSize", type=int, help="the population size")
    ap.add_argument("-d", "--dimensions", type=int, help="dimensionality of the search space")
    ap.add_argument("-T", "--maxIterations", type=int, help="the maximum number of iterations")
    ap.add_argument("-L", "--searchSpaceMin", type=float, help="the search space's lower bound")
    ap.add_argument("-U", "--searchSpaceMax", type=float, help="the search space's upper bound")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log every iteration (default: off)")
    ap.add_argument("--seed", type=int, help=f"random seed (default: {DEFAULT_SEED})")
    ap.add_argument("--function", default="ackley", choices=sorted(FUNCTIONS),
                    help="objective function to minimize (default: ackley)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    ap = build_parser()
    if not argv:
        ap.print_help()
        return 0
    args = ap.parse_args(argv)

    try:
        if args.file:
            cfg = load_config(args.file)
        else:
            cfg = make_config(population_size=args.populationSize, dimensions=args.dimensions,
                              max_iterations=args.maxIterations, search_space_min=args.searchSpaceMin,
                              search_space_max=args.searchSpaceMax, enable_logging=args.verbose,
                              seed=args.seed)
    except (ConfigError, FileNotFoundError) as e:
        ap.error(str(e))
    if cfg.seed is None:
        cfg = replace(cfg, seed=DEFAULT_SEED)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s",
                        datefmt="%H:%M:%S")

    algo = MRFO(cfg, get_function(args.function))
    algo.initialize()
    while not algo.is_done():
        algo.step()

    logger.info("Optimization complete!")
    logger.info("Best fitness: %s", algo.best_fitness)
    logger.info("Best solution: %s", np.array2string(algo.best_solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
