"""Domain constants for wallet ranking and swaps."""

from src.domain.models.balances import Blockchain

BLOCKCHAIN_PRIORITIES = {
    Blockchain.OSMOSIS: 100,
    Blockchain.ETHEREUM: 50,
    Blockchain.ARBITRUM: 30,
    Blockchain.ZILLIQA: 20,
    Blockchain.NEO: 20,
}

UNKNOWN_BLOCKCHAIN_PRIORITY = -99


__all__ = ["BLOCKCHAIN_PRIORITIES", "UNKNOWN_BLOCKCHAIN_PRIORITY"]
