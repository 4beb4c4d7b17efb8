import boa
import pytest
from eth_utils import to_wei
from moccasin.config import get_active_network

from script.deploy_all import ALL, run_deployments
from script.helper_config import FUND_ME, MOCK_PRICE_FEED, is_development_chain

SEND_VALUE = to_wei(1, "ether")
STARTING_BALANCE = to_wei(100, "ether")

FUNDER = boa.env.generate_address("funder")
RANDOM_USER = boa.env.generate_address("no_owner")


@pytest.fixture(scope="function")
def deployments():
    # Fresh deployment of every tagged script before each test
    if not is_development_chain(get_active_network().name):
        pytest.skip("unit tests run on development chains only")
    return run_deployments([ALL])


@pytest.fixture(scope="function")
def price_feed(deployments):
    return deployments[MOCK_PRICE_FEED].contract


@pytest.fixture(scope="function")
def fund_me(deployments):
    return deployments[FUND_ME].contract


@pytest.fixture(scope="function")
def owner(fund_me):
    owner = fund_me.getOwner()
    boa.env.set_balance(owner, STARTING_BALANCE)
    return owner


@pytest.fixture(scope="function")
def funders():
    funders = [boa.env.generate_address(f"funder_{i}") for i in range(5)]
    for funder in funders:
        boa.env.set_balance(funder, STARTING_BALANCE)
    return funders


@pytest.fixture(scope="function")
def fund_me_funded(fund_me, owner):
    with boa.env.prank(owner):
        fund_me.fund(value=SEND_VALUE)
    return fund_me
