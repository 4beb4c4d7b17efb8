import os
from typing import Callable, Iterable, List, NamedTuple, Sequence

from script.deploy import deploy_fund_me
from script.deploy_mocks import deploy_mocks
from script.deployments import Deployments
from script.helper_config import DEPLOY_TAGS_ENVVAR

ALL = "all"
MOCKS = "mocks"
FUNDME = "fundme"


class DeployStep(NamedTuple):
    name: str
    tags: Sequence[str]
    run: Callable[[Deployments], object]


# Ordered: the FundMe step consumes the mock recorded by the mocks step.
DEPLOY_STEPS: List[DeployStep] = [
    DeployStep(name="00-deploy-mocks", tags=(ALL, MOCKS), run=deploy_mocks),
    DeployStep(name="01-deploy-fund-me", tags=(ALL, FUNDME), run=deploy_fund_me),
]

SUPPORTED_TAGS = [ALL, MOCKS, FUNDME]


def _validate_tags(tags: Iterable[str]) -> List[str]:
    tags = [tag.strip() for tag in tags if tag.strip()]
    unknown = [tag for tag in tags if tag not in SUPPORTED_TAGS]
    if unknown:
        raise ValueError(
            f"Unknown deployment tag(s) {', '.join(unknown)}; "
            f"expected one of {', '.join(SUPPORTED_TAGS)}."
        )
    return tags or [ALL]


def select_steps(tags: Iterable[str]) -> List[DeployStep]:
    requested = set(_validate_tags(tags))
    return [step for step in DEPLOY_STEPS if requested.intersection(step.tags)]


def run_deployments(tags: Iterable[str] = (ALL,)) -> Deployments:
    """
    Runs every deployment step carrying one of the given tags, in order.

    Returns:
        Deployments: The records of the contracts deployed by the selected steps.
    """
    deployments: Deployments = {}
    for step in select_steps(tags):
        step.run(deployments)
    return deployments


def tags_from_environment() -> List[str]:
    return _validate_tags(os.environ.get(DEPLOY_TAGS_ENVVAR, ALL).split(","))


def moccasin_main() -> Deployments:
    deployments = run_deployments(tags_from_environment())
    for name, deployment in deployments.items():
        print(f"{name}: {deployment.address}")
    return deployments
