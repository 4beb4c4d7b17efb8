import os
import time
from typing import Optional

from boa.rpc import EthereumRPC
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import fund_me
from script.deploy_mocks import deploy_mocks
from script.deployments import Deployments, get_deployment, record_deployment
from script.helper_config import (
    EXPLORER_API_KEY_ENVVAR,
    FUND_ME,
    MOCK_PRICE_FEED,
    get_block_confirmations,
    get_price_feed,
    is_development_chain,
)
from script.verify import verify

POLL_INTERVAL = 2  # seconds


def get_price_feed_address(
    network_name: str, chain_id: Optional[int], deployments: Optional[Deployments] = None
) -> str:
    """
    Resolves the ETH/USD price feed the FundMe contract is constructed with.

    Development chains use the locally deployed mock; every other chain uses the
    address configured for its chain id.
    """
    if is_development_chain(network_name):
        return get_deployment(deployments or {}, MOCK_PRICE_FEED).address
    return get_price_feed(chain_id)


def is_live_network(active_network) -> bool:
    """Returns False for development chains and for local forks of live chains."""
    if is_development_chain(active_network.name):
        return False
    return not active_network.is_local_or_forked_network()


def _block_number(rpc) -> int:
    return int(rpc.fetch("eth_blockNumber", []), 16)


def wait_for_confirmations(
    confirmations: int, rpc_url: Optional[str] = None, rpc=None, poll_interval: float = POLL_INTERVAL
):
    """Blocks until `confirmations` blocks include the latest mined transaction."""
    if confirmations <= 1:
        return
    rpc = rpc or EthereumRPC(rpc_url)
    target = _block_number(rpc) + confirmations - 1
    print(f"Waiting for {confirmations} block confirmations...")
    while _block_number(rpc) < target:
        time.sleep(poll_interval)


def deploy_fund_me(deployments: Optional[Deployments] = None) -> VyperContract:
    """
    Deploys the FundMe contract against the price feed of the active network.

    Returns:
        VyperContract: The deployed FundMe contract instance.
    """
    active_network = get_active_network()
    price_feed_address = get_price_feed_address(
        active_network.name, active_network.chain_id, deployments
    )
    print(f"network: {active_network.name} , using price feed at {price_feed_address}")

    args = [price_feed_address]
    fund_me_contract: VyperContract = fund_me.deploy(*args)
    print(f"Contract deployed to {fund_me_contract.address}")

    if deployments is not None:
        record_deployment(deployments, FUND_ME, fund_me_contract, args)

    if is_live_network(active_network):
        wait_for_confirmations(
            get_block_confirmations(active_network.chain_id), rpc_url=active_network.url
        )
        if os.environ.get(EXPLORER_API_KEY_ENVVAR):
            verify(fund_me_contract, args)

    print("---------------------------")
    return fund_me_contract


def moccasin_main() -> VyperContract:
    deployments: Deployments = {}
    deploy_mocks(deployments)
    return deploy_fund_me(deployments)
