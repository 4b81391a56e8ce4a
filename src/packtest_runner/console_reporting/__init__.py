"""Console reporting exports."""

from .ci_groups import ci_group

__all__ = ["ci_group"]
