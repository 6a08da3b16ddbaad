from typing import Any, List, NamedTuple, Optional

from forwarder_deployment.config import DeploymentConfig
from forwarder_deployment.constants import FAILURE_BANNER, SUCCESS_BANNER
from forwarder_deployment.network import DeployedContract, NetworkConnection
from forwarder_deployment.steps import (
    DeploymentContext,
    Step,
    StepFailed,
    StepSucceeded,
    build_pipeline,
)


class DeploymentFailed(Exception):
    """Raised when any deployment step fails; the remaining steps are skipped."""

    def __init__(self, step: str, error: Exception):
        self.step = step
        self.error = error
        super().__init__(f"Step '{step}' failed: {error!r}")


class DeploymentReport(NamedTuple):
    contract: DeployedContract
    results: List[StepSucceeded]
    total_gas_used: int


def get_signer(network: NetworkConnection, index: int) -> Any:
    """Obtains the deployer account, reporting any lookup error as a failed deployment."""
    try:
        return network.signer(index)
    except Exception as error:
        raise DeploymentFailed(step="signer", error=error) from error


def report_failure(error: DeploymentFailed) -> int:
    print(FAILURE_BANNER)
    print(error)
    return 1


class DeploymentRunner:
    """
    Deploys and configures the forwarder as an ordered pipeline of steps,
    stopping at the first step that fails.
    """

    def __init__(
        self,
        config: DeploymentConfig,
        network: NetworkConnection,
        steps: Optional[List[Step]] = None,
        signer: Any = None,
    ):
        self.config = config
        self.network = network
        self.steps = steps if steps is not None else build_pipeline(config)
        self.signer = signer

    def run(self) -> DeploymentReport:
        signer = self.signer
        if signer is None:
            signer = get_signer(self.network, self.config.signer_index)

        context = DeploymentContext(config=self.config, network=self.network, signer=signer)
        results = list()
        for step in self.steps:
            result = step.execute(context)
            if isinstance(result, StepFailed):
                raise DeploymentFailed(step=result.step, error=result.error) from result.error
            results.append(result)

        print(SUCCESS_BANNER)
        print(f"Total gas used in deployment is : {context.gas.total}")
        return DeploymentReport(
            contract=context.contract,
            results=results,
            total_gas_used=context.gas.total,
        )


def execute(config: DeploymentConfig, network: NetworkConnection, signer: Any = None) -> int:
    """Runs a deployment and returns the process exit code."""
    runner = DeploymentRunner(config=config, network=network, signer=signer)
    try:
        runner.run()
    except DeploymentFailed as error:
        return report_failure(error)
    return 0
