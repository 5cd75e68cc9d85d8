"""Use case to submit the swap described by the form."""

from src.application.ports.swap_executor import SwapExecutorPort
from src.application.use_cases.swap_form import (
    FormStatus,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    SwapFormState,
    current_conversion,
    current_request,
    reduce,
)
from src.infrastructure.logging.logger import get_app_logger


class SubmitSwapUseCase:
    """Drive the form through submission and report the outcome."""

    def __init__(self, executor: SwapExecutorPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            executor: Port executing validated swaps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._executor = executor
        self._logger = logger or get_app_logger()

    def execute(self, state: SwapFormState) -> SwapFormState:
        """Submit the form and return the resulting state.

        Args:
            state: Form snapshot at submit time.

        Returns:
            SwapFormState: SUCCESS, FAILED, or the unchanged state when a
            submission is already in flight.
        """
        if state.status is FormStatus.SUBMITTING:
            return state
        submitting = reduce(state, SubmitRequested())
        if submitting.status is not FormStatus.SUBMITTING:
            return submitting

        request = current_request(submitting)
        result = current_conversion(submitting)
        try:
            self._executor.execute(request, result)
        except Exception as exc:
            self._logger.error(f"Swap failed: {exc}")
            return reduce(submitting, SubmitFailed())

        self._logger.info(
            f"Swap submitted: {request.input_quantity} {request.source_symbol} "
            f"-> {result.display_value} {request.dest_symbol}"
        )
        return reduce(submitting, SubmitSucceeded())


__all__ = ["SubmitSwapUseCase"]
