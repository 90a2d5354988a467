"""
Pool Package

This package manages the population of agents and its reproduction.

Exported:
    Population: Fixed-size set of agents with elitist, tiered reproduction
"""

from evojump.pool.population import Population

__all__ = [
    'Population'
]
