"""
Exceptions raised by the evojump package.

Both are fatal programming/configuration errors: nothing inside the package
catches or retries them.

Classes:
    ConfigError: Malformed network configuration or unknown activation name
    ShapeError:  Input vector length does not match the expected width
"""

class ConfigError(ValueError):
    """Raised when a network or activation configuration cannot be built."""

class ShapeError(ValueError):
    """Raised when an input vector does not match a neuron/layer/network width."""
