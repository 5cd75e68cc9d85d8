"""Application use cases package."""

from .convert_amount import ConvertAmountUseCase
from .get_price_table import GetPriceTableUseCase
from .get_ranked_balances import GetRankedBalancesUseCase
from .submit_swap import SubmitSwapUseCase
from .swap_form import FormStatus, SwapFormState, is_form_valid, reduce

__all__ = [
    "ConvertAmountUseCase",
    "GetPriceTableUseCase",
    "GetRankedBalancesUseCase",
    "SubmitSwapUseCase",
    "FormStatus",
    "SwapFormState",
    "is_form_valid",
    "reduce",
]
