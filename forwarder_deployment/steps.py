from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional, Tuple, Union

from forwarder_deployment.config import DeploymentConfig
from forwarder_deployment.constants import (
    DOMAIN_SEPARATOR_NAME,
    DOMAIN_SEPARATOR_VERSION,
    FORWARDER_CONTRACT_NAME,
    FORWARDER_DISPLAY_NAME,
)
from forwarder_deployment.network import DeployedContract, NetworkConnection, TransactionReceipt


class GasAccumulator:
    """Running total of gas used by confirmed transactions."""

    def __init__(self):
        self._total = 0

    @property
    def total(self) -> int:
        return self._total

    def add(self, receipt: TransactionReceipt) -> int:
        if not receipt.confirmed:
            raise ValueError(f"Transaction {receipt.txn_hash} is not confirmed.")
        if receipt.gas_used < 0:
            raise ValueError(f"Negative gas used reported for {receipt.txn_hash}.")
        self._total += receipt.gas_used
        return self._total


class DeploymentContext:
    """State shared by the steps of one deployment."""

    def __init__(self, config: DeploymentConfig, network: NetworkConnection, signer: Any):
        self.config = config
        self.network = network
        self.signer = signer
        self.gas = GasAccumulator()
        self.contract: Optional[DeployedContract] = None


class StepSucceeded(NamedTuple):
    step: str
    receipt: TransactionReceipt
    contract: Optional[DeployedContract] = None

    @property
    def gas_used(self) -> int:
        return self.receipt.gas_used


class StepFailed(NamedTuple):
    step: str
    error: Exception


StepResult = Union[StepSucceeded, StepFailed]


class Step(ABC):
    name: Optional[str] = None

    @abstractmethod
    def _execute(
        self, context: DeploymentContext
    ) -> Tuple[TransactionReceipt, Optional[DeployedContract]]:
        raise NotImplementedError

    def _announce(self, context: DeploymentContext) -> None:
        pass

    def execute(self, context: DeploymentContext) -> StepResult:
        """
        Runs the step to its confirmation depth and accounts for its gas.
        Any error is returned as a StepFailed rather than raised.
        """
        try:
            receipt, contract = self._execute(context)
            context.gas.add(receipt)
        except Exception as error:
            return StepFailed(step=self.name, error=error)

        self._announce(context)
        print(f"Gas used : {receipt.gas_used}")
        return StepSucceeded(step=self.name, receipt=receipt, contract=contract)

    @staticmethod
    def _require_contract(context: DeploymentContext) -> DeployedContract:
        if context.contract is None:
            raise RuntimeError(f"{FORWARDER_DISPLAY_NAME} has not been deployed.")
        return context.contract


class DeployForwarder(Step):
    name = "deploy"

    def _execute(self, context):
        contract = context.network.deploy(
            FORWARDER_CONTRACT_NAME,
            signer=context.signer,
            confirmations=context.config.confirmations.deploy,
        )
        context.contract = contract
        return contract.receipt, contract

    def _announce(self, context):
        print(f"✅ {FORWARDER_DISPLAY_NAME} deployed at : {context.contract.address}")


class RegisterDomainSeparator(Step):
    name = "registerDomainSeparator"

    def __init__(
        self, domain_name: str = DOMAIN_SEPARATOR_NAME, version: str = DOMAIN_SEPARATOR_VERSION
    ):
        self.domain_name = domain_name
        self.version = version

    def _execute(self, context):
        contract = self._require_contract(context)
        receipt = context.network.transact(
            contract,
            "registerDomainSeparator",
            self.domain_name,
            self.version,
            signer=context.signer,
            confirmations=context.config.confirmations.register,
        )
        return receipt, None


class TransferOwnership(Step):
    name = "transferOwnership"

    def __init__(self, new_owner: str):
        self.new_owner = new_owner

    def _execute(self, context):
        contract = self._require_contract(context)
        receipt = context.network.transact(
            contract,
            "transferOwnership",
            self.new_owner,
            signer=context.signer,
            confirmations=context.config.confirmations.transfer,
        )
        return receipt, None

    def _announce(self, context):
        print(f"✅ {FORWARDER_DISPLAY_NAME} ownership transferred to {self.new_owner}")


def build_pipeline(config: DeploymentConfig) -> List[Step]:
    """Returns the ordered deployment steps for a config."""
    steps: List[Step] = [DeployForwarder(), RegisterDomainSeparator()]
    if config.transfer_ownership:
        steps.append(TransferOwnership(new_owner=config.new_owner))
    return steps
