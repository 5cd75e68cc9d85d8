"""Simulated swap execution."""

import time

from src.application.ports.swap_executor import SwapExecutorPort
from src.domain.models import ConversionRequest, ConversionResult
from src.infrastructure.logging.logger import get_usage_logger


class SimulatedSwapExecutor(SwapExecutorPort):
    """Swap executor that waits a fixed delay and records the swap."""

    def __init__(self, delay_seconds: float = 1.5, logger=None, sleep=None) -> None:
        self._delay_seconds = delay_seconds
        self._logger = logger or get_usage_logger()
        self._sleep = sleep or time.sleep

    def execute(
        self,
        request: ConversionRequest,
        result: ConversionResult,
    ) -> None:
        self._sleep(self._delay_seconds)
        self._logger.info(
            f"Swap executed: {request.input_quantity} {request.source_symbol} "
            f"for {result.display_value} {request.dest_symbol}"
        )


__all__ = ["SimulatedSwapExecutor"]
