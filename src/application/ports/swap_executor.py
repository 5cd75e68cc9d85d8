"""Application port for executing swaps."""

from typing import Protocol

from src.domain.models import ConversionRequest, ConversionResult


class SwapExecutorPort(Protocol):
    """Port submitting a validated swap."""

    def execute(
        self,
        request: ConversionRequest,
        result: ConversionResult,
    ) -> None:
        """Submit the swap.

        Raises:
            RuntimeError: If the swap could not be completed.
        """


__all__ = ["SwapExecutorPort"]
