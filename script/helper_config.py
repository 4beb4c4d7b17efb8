from typing import Dict, NamedTuple, Optional

from eth_utils import to_checksum_address


class DeploymentConfigError(ValueError):
    pass


class MissingPriceFeedError(DeploymentConfigError):
    pass


class MissingDeploymentError(DeploymentConfigError):
    pass


class NetworkConfig(NamedTuple):
    name: str
    eth_usd_price_feed: Optional[str] = None
    block_confirmations: int = 1


#
# Networks
#

NETWORK_CONFIG: Dict[int, NetworkConfig] = {
    1: NetworkConfig(
        name="mainnet",
        eth_usd_price_feed="0x5f4eC3Df9cbd43714FE2740f5E3616155c5b8419",
        block_confirmations=6,
    ),
    11155111: NetworkConfig(
        name="sepolia",
        eth_usd_price_feed="0x694AA1769357215DE4FAC081bf1f309aDC325306",
        block_confirmations=6,
    ),
    137: NetworkConfig(
        name="polygon",
        eth_usd_price_feed="0xF9680D99D6C9589e2a93a78A04A279e509205945",
        block_confirmations=6,
    ),
    42161: NetworkConfig(
        name="arbitrum",
        eth_usd_price_feed="0x639Fe6ab55C921f74e7fac1ee960C0B6293ba612",
        block_confirmations=2,
    ),
}

DEVELOPMENT_CHAINS = ["pyevm", "eravm", "anvil", "localhost", "hardhat"]

DEFAULT_BLOCK_CONFIRMATIONS = 1

#
# Mocks
#

DECIMALS = 8
INITIAL_ANSWER = 2000 * 10**DECIMALS  # 2000 USD / ETH

#
# Contracts
#

MOCK_PRICE_FEED = "mock_v3_aggregator"
FUND_ME = "fund_me"

#
# Environment
#

EXPLORER_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"
DEPLOY_TAGS_ENVVAR = "DEPLOY_TAGS"


def is_development_chain(network_name: str) -> bool:
    """Returns True if the network is a local / ephemeral chain."""
    return network_name in DEVELOPMENT_CHAINS


def _normalize_chain_id(chain_id) -> Optional[int]:
    try:
        return int(chain_id)
    except (TypeError, ValueError):
        return None


def get_network_config(chain_id: int) -> NetworkConfig:
    network_config = NETWORK_CONFIG.get(_normalize_chain_id(chain_id))
    if network_config is None:
        raise MissingPriceFeedError(f"No network config found for chain_id {chain_id}.")
    return network_config


def get_price_feed(chain_id: int) -> str:
    """Returns the configured ETH/USD price feed for a live chain."""
    network_config = get_network_config(chain_id)
    if not network_config.eth_usd_price_feed:
        raise MissingPriceFeedError(
            f"eth_usd_price_feed is not set for {network_config.name} (chain_id {chain_id})."
        )
    return to_checksum_address(network_config.eth_usd_price_feed)


def get_block_confirmations(chain_id: Optional[int]) -> int:
    network_config = NETWORK_CONFIG.get(_normalize_chain_id(chain_id))
    if network_config is None:
        return DEFAULT_BLOCK_CONFIRMATIONS
    return network_config.block_confirmations or DEFAULT_BLOCK_CONFIRMATIONS
