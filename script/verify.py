from typing import Any, List

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

ALREADY_VERIFIED = "already verified"


def verify(contract: VyperContract, constructor_args: List[Any]) -> bool:
    """
    Publishes the contract source to the active network's block explorer.

    A contract the explorer reports as already verified counts as verified;
    any other failure is printed and does not fail the deployment.

    Returns:
        bool: True if the contract is verified on the explorer.
    """
    print("Verifying contract...")
    print(f"\taddress={contract.address}")
    for position, value in enumerate(constructor_args):
        print(f"\targs[{position}]={value}")

    active_network = get_active_network()
    try:
        result = active_network.moccasin_verify(contract)
        result.wait_for_verification()
    except Exception as e:
        if ALREADY_VERIFIED in str(e).lower():
            print("Already Verified!")
            return True
        print(f"Verification failed: {e!r}")
        return False

    print("Verified!")
    return True
