"""Version control adapters."""

from rigid.adapters.vcs.git import GitAdapter

__all__ = ["GitAdapter"]
