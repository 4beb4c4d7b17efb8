from typing import Any, Dict, List, NamedTuple

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from moccasin.boa_tools import VyperContract

from script.helper_config import MissingDeploymentError

ContractName = str


class Deployment(NamedTuple):
    """A contract deployed by this project's deployment pipeline."""

    name: ContractName
    address: ChecksumAddress
    abi: List[Dict[str, Any]]
    args: List[Any]
    contract: VyperContract


Deployments = Dict[ContractName, Deployment]


def record_deployment(
    deployments: Deployments, name: ContractName, contract: VyperContract, args: List[Any]
) -> Deployment:
    deployment = Deployment(
        name=name,
        address=to_checksum_address(contract.address),
        abi=list(contract.abi),
        args=list(args),
        contract=contract,
    )
    deployments[name] = deployment
    return deployment


def get_deployment(deployments: Deployments, name: ContractName) -> Deployment:
    try:
        return deployments[name]
    except KeyError:
        raise MissingDeploymentError(f"No deployment found for '{name}'.")
