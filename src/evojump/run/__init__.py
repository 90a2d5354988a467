"""
Run Package

This package provides configuration parsing and the trial driving evolution.

Exported:
    Config:          Configuration parameters, read from an INI file
    Trial:           One run of the evolutionary algorithm
    GenerationState: Whether the current generation is running or extinct
"""

from evojump.run.config import Config
from evojump.run.trial  import Trial, GenerationState

__all__ = [
    'Config',
    'Trial',
    'GenerationState'
]
