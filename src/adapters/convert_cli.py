"""CLI adapter converting a token amount at current prices.

Reads SWAP_FROM, SWAP_TO and SWAP_AMOUNT from the environment and prints the
received amount truncated to six decimals.
"""

import os

import httpx

from src.application.use_cases.convert_amount import ConvertAmountUseCase
from src.application.use_cases.get_price_table import GetPriceTableUseCase
from src.domain.models import ConversionResult
from src.infrastructure.container import build_price_source
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a single conversion and print the outcome."""
    logger = get_app_logger()
    source = os.getenv("SWAP_FROM", "").strip()
    dest = os.getenv("SWAP_TO", "").strip()
    amount = os.getenv("SWAP_AMOUNT", "").strip()
    if not source or not dest or not amount:
        logger.warning("SWAP_FROM, SWAP_TO and SWAP_AMOUNT are required.")
        return

    use_case = ConvertAmountUseCase(
        GetPriceTableUseCase(build_price_source(), logger=logger)
    )
    try:
        outcome = use_case.execute(source, dest, amount)
    except httpx.HTTPError as exc:
        logger.error(f"Failed to fetch token prices: {exc}")
        return

    if isinstance(outcome, ConversionResult):
        print(f"{amount} {source} = {outcome.display_value} {dest}")
    else:
        print(f"Conversion failed: {outcome.message}")


if __name__ == "__main__":  # pragma: no cover
    main()
