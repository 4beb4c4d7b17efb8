from typing import Optional

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts.mocks import mock_v3_aggregator
from script.deployments import Deployments, record_deployment
from script.helper_config import (
    DECIMALS,
    INITIAL_ANSWER,
    MOCK_PRICE_FEED,
    is_development_chain,
)


def deploy_mocks(deployments: Optional[Deployments] = None) -> Optional[VyperContract]:
    """
    Deploys a mock ETH/USD price feed when running on a development chain.

    Returns:
        VyperContract: The deployed mock aggregator, or None on live networks.
    """
    active_network = get_active_network()
    if not is_development_chain(active_network.name):
        return None

    print("Local network detected! Deploying mocks...")
    args = [DECIMALS, INITIAL_ANSWER]
    price_feed: VyperContract = mock_v3_aggregator.deploy(*args)
    print(f"Mock price feed deployed at: {price_feed.address}")

    if deployments is not None:
        record_deployment(deployments, MOCK_PRICE_FEED, price_feed, args)

    print("Mocks deployed!")
    print("--------------------")
    return price_feed


def moccasin_main() -> Optional[VyperContract]:
    return deploy_mocks()
