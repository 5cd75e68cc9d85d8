"""CLI adapter printing ranked wallet balances with their USD value."""

import httpx

from src.application.use_cases.get_price_table import GetPriceTableUseCase
from src.application.use_cases.get_ranked_balances import (
    GetRankedBalancesUseCase,
)
from src.domain.models import PriceTable
from src.infrastructure.container import (
    build_balance_source,
    build_fiat_price_source,
    build_price_source,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import WalletSettings


def main() -> None:
    """Rank the configured wallet balances and print them."""
    logger = get_app_logger()
    settings = WalletSettings.from_env()

    try:
        table = GetPriceTableUseCase(
            build_price_source(settings),
            logger=logger,
        ).execute()
    except httpx.HTTPError as exc:
        logger.error(f"Failed to fetch token prices: {exc}")
        table = PriceTable()

    try:
        use_case = GetRankedBalancesUseCase(
            build_balance_source(settings),
            build_fiat_price_source(table),
            logger=logger,
            merge_duplicates=settings.merge_duplicate_balances,
        )
        rows = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(f"Wallet balances ({len(rows)} shown)")
    for row in rows:
        print(
            f"{row.blockchain:<10} {row.currency:<8} "
            f"{row.formatted_amount:>16} {row.fiat_value:>16.2f} USD"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
