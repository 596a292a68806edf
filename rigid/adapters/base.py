"""
Adapter base — the protocol contract between the bootstrapper and tools.

The bootstrapper never spawns processes itself. It hands each step to
an injected adapter and waits for the Receipt, which keeps the process
layer swappable (the test suite swaps in ``MockAdapter``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from rigid.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action
    workdir: str = "."
    dry_run: bool = False


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.

    To create a new adapter:
        1. Subclass Adapter
        2. Implement name, is_available, validate, execute
        3. Pass an instance wherever an executor is expected
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'git', 'shell')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this adapter's underlying tool is on PATH.

        Should be fast and never raise.
        """

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def run(self, context: ExecutionContext) -> Receipt:
        """Validate, then execute (or skip on dry-run)."""
        try:
            is_valid, error_msg = self.validate(context)
        except Exception as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Validation error: {e}",
            )
        if not is_valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Validation failed: {error_msg}",
            )

        if context.dry_run:
            return Receipt.skip(
                adapter=self.name,
                action_id=context.action.id,
                reason=f"[dry-run] Would execute {context.action.name or context.action.id}",
                metadata={"dry_run": True},
            )

        try:
            return self.execute(context)
        except Exception as e:
            # Adapters should never raise, but a bug in one must not escape
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Unexpected error: {e}",
            )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
