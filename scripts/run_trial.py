#!/usr/bin/env python3
"""
Utility script to run a jumping trial from a configuration file.

Usage:
    python scripts/run_trial.py
    python scripts/run_trial.py --config examples/configs/config_jump.ini --generations 20
    python scripts/run_trial.py --population 200 --seed 7 --visualize
"""

import argparse
import random
from pathlib import Path

from evojump import Config, Trial

DEFAULT_CONFIG = Path(__file__).parent.parent / 'examples' / 'configs' / 'config_jump.ini'


def main():
    parser = argparse.ArgumentParser(description='Evolve robots that jump over the box')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG),
                        help='Path to the INI configuration file')
    parser.add_argument('--generations', type=int, default=None,
                        help='Override the maximum number of generations')
    parser.add_argument('--population', type=int, default=None,
                        help='Override the population size')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random number generator')
    parser.add_argument('--visualize', action='store_true',
                        help='Draw the champion network at the end of the run')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print progress reports')

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)

    config = Config(args.config)
    if args.generations is not None:
        config.max_number_generations = args.generations
    if args.population is not None:
        config.population_size = args.population

    print(f"Population size: {config.population_size}")
    print(f"Network layers:  {', '.join(f'{s.size}:{s.activation}' for s in config.layer_config)}")

    trial = Trial(config, suppress_output=args.quiet, visualize=args.visualize)
    trial.run()

    if trial.history:
        print(f"\nBest fitness: {max(trial.history):.1f} after {trial.generation} generations")


if __name__ == '__main__':
    main()
