from __future__ import annotations

from relaystatus.schemas.status import NativeCurrency, Network


def _network(
    name: str, chain_id: int, title: str, network_type: str, symbol: str, currency_name: str
) -> Network:
    return Network(
        name=name,
        chain_id=chain_id,
        title=title,
        type=network_type,
        native_currency=NativeCurrency(symbol=symbol, name=currency_name, decimals=18),
    )


# Registry order is the order of the aggregated snapshot.
NETWORKS: tuple[Network, ...] = (
    _network("mainnet", 1, "Ethereum", "mainnet", "ETH", "Ether"),
    _network("polygon", 137, "Polygon", "mainnet", "POL", "POL"),
    _network("polygon-zkevm", 1101, "Polygon zkEVM", "mainnet", "ETH", "Ether"),
    _network("bsc", 56, "BNB Smart Chain", "mainnet", "BNB", "BNB"),
    _network("avalanche", 43114, "Avalanche", "mainnet", "AVAX", "AVAX"),
    _network("arbitrum", 42161, "Arbitrum One", "mainnet", "ETH", "Ether"),
    _network("arbitrum-nova", 42170, "Arbitrum Nova", "mainnet", "ETH", "Ether"),
    _network("optimism", 10, "Optimism", "mainnet", "ETH", "Ether"),
    _network("base", 8453, "Base (Coinbase)", "mainnet", "ETH", "Ether"),
    _network("gnosis", 100, "Gnosis Chain", "mainnet", "XDAI", "XDAI"),
    _network("blast", 81457, "Blast", "mainnet", "ETH", "Ether"),
    _network("apechain", 33139, "APE Chain", "mainnet", "APE", "ApeCoin"),
    _network("xai", 660279, "Xai", "mainnet", "XAI", "XAI"),
    _network("b3", 8333, "B3", "mainnet", "ETH", "Ether"),
    _network("immutable-zkevm", 13371, "Immutable zkEVM", "mainnet", "IMX", "IMX"),
    _network("soneium", 1868, "Soneium", "mainnet", "ETH", "Ether"),
    _network("etherlink", 42793, "Etherlink", "mainnet", "XTZ", "Tez"),
    _network("homeverse", 19011, "Oasys Homeverse", "mainnet", "OAS", "OAS"),
    _network("moonbeam", 1284, "Moonbeam", "mainnet", "GLMR", "GLMR"),
    _network("sepolia", 11155111, "Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network("amoy", 80002, "Polygon Amoy", "testnet", "aPOL", "Amoy POL"),
    _network("arbitrum-sepolia", 421614, "Arbitrum Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network("optimism-sepolia", 11155420, "Optimism Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network("base-sepolia", 84532, "Base Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network("bsc-testnet", 97, "BNB Smart Chain Testnet", "testnet", "tBNB", "Test BNB"),
    _network("avalanche-testnet", 43113, "Avalanche Fuji", "testnet", "tAVAX", "Test AVAX"),
    _network("blast-sepolia", 168587773, "Blast Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network("apechain-testnet", 33111, "APE Chain Curtis", "testnet", "tAPE", "Test ApeCoin"),
    _network("xai-sepolia", 37714555429, "Xai Sepolia", "testnet", "sXAI", "Sepolia XAI"),
    _network("b3-sepolia", 1993, "B3 Sepolia", "testnet", "sETH", "Sepolia Ether"),
    _network(
        "immutable-zkevm-testnet", 13473, "Immutable zkEVM Testnet", "testnet", "tIMX", "Test IMX"
    ),
    _network("soneium-minato", 1946, "Soneium Minato", "testnet", "sETH", "Sepolia Ether"),
    _network("etherlink-testnet", 128123, "Etherlink Testnet", "testnet", "tXTZ", "Test Tez"),
    _network(
        "homeverse-testnet", 40875, "Oasys Homeverse Testnet", "testnet", "tOAS", "Test OAS"
    ),
)

_BY_NAME = {network.name: network for network in NETWORKS}


def get_network(name: str) -> Network | None:
    return _BY_NAME.get(name.strip().lower())
