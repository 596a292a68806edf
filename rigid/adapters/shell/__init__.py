"""Shell adapters."""

from rigid.adapters.shell.command import ShellCommandAdapter

__all__ = ["ShellCommandAdapter"]
