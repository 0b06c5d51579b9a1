"""PipeLoss core: steady-state pressure drop and head loss for liquid piping."""

__version__ = "0.1.0"
