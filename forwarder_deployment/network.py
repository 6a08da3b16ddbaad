import typing
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple

from ape import accounts, networks, project
from ape.api import AccountAPI, ReceiptAPI
from ape.contracts import ContractContainer, ContractInstance
from ethpm_types import MethodABI
from web3.auto import w3

from forwarder_deployment.constants import LOCAL_NETWORK_NAMES


class TransactionReceipt(NamedTuple):
    """A confirmed (or failed) transaction, reduced to what the deployment reports."""

    txn_hash: str
    block_number: int
    gas_used: int
    confirmed: bool


class DeployedContract(NamedTuple):
    address: str
    receipt: TransactionReceipt
    instance: Any = None


class NetworkConnection(ABC):
    """
    Signer lookup plus blocking transaction submission.
    Every call returns only once the requested confirmation depth is reached.
    """

    @abstractmethod
    def signer(self, index: int) -> Any:
        raise NotImplementedError

    @abstractmethod
    def deploy(self, contract_name: str, signer: Any, confirmations: int) -> DeployedContract:
        raise NotImplementedError

    @abstractmethod
    def transact(
        self,
        contract: DeployedContract,
        method_name: str,
        *args,
        signer: Any,
        confirmations: int,
    ) -> TransactionReceipt:
        raise NotImplementedError

    def describe(self, signer: Any) -> List[str]:
        """Returns human readable lines about the connection."""
        return [f"Account: {signer.address}"]


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORK_NAMES


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            contract_container = getattr(dependency_api, contract)
            return contract_container
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container


def _validate_method_args(
    method_abis: List[MethodABI], args: typing.Sequence[Any]
) -> typing.Dict[str, Any]:
    """Validates the transaction arguments against the function ABI."""
    if len(method_abis) == 0:
        raise ValueError("No method abis provided for validation of args")

    abis_matching_args_length = [abi for abi in method_abis if len(abi.inputs) == len(args)]
    for abi in abis_matching_args_length:
        named_args = {}
        for arg, abi_input in zip(args, abi.inputs):
            if not w3.is_encodable(abi_input.type, arg):
                break
            named_args[abi_input.name] = arg
        else:
            return named_args
    raise ValueError(
        f"Could not find ABI for '{method_abis[0].name}' with {len(args)} arg(s) and given type(s)"
    )


def _to_receipt(receipt: ReceiptAPI) -> TransactionReceipt:
    return TransactionReceipt(
        txn_hash=str(receipt.txn_hash),
        block_number=receipt.block_number,
        gas_used=receipt.gas_used,
        confirmed=not receipt.failed,
    )


class ApeNetwork(NetworkConnection):
    """NetworkConnection backed by the active ape provider."""

    def signer(self, index: int) -> AccountAPI:
        container = accounts.test_accounts if is_local_network() else accounts
        try:
            return container[index]
        except IndexError:
            raise ValueError(f"No signer available at index {index}.")

    def deploy(
        self, contract_name: str, signer: AccountAPI, confirmations: int
    ) -> DeployedContract:
        container = get_contract_container(contract_name)
        print(f"\nDeploying {container.contract_type.name} from {signer.address}...")
        instance: ContractInstance = signer.deploy(
            container,
            required_confirmations=confirmations,
        )
        return DeployedContract(
            address=instance.address,
            receipt=_to_receipt(instance.receipt),
            instance=instance,
        )

    def transact(
        self,
        contract: DeployedContract,
        method_name: str,
        *args,
        signer: AccountAPI,
        confirmations: int,
    ) -> TransactionReceipt:
        method = getattr(contract.instance, method_name)
        named_args = _validate_method_args(method_abis=method.abis, args=args)
        base_message = (
            f"\nTransacting {contract.instance.contract_type.name}"
            f"[{contract.address[:10]}].{method_name}"
        )
        if named_args:
            pretty_args = "\n\t".join(f"{k}={v}" for k, v in named_args.items())
            message = f"{base_message} with arguments:\n\t{pretty_args}"
        else:
            message = f"{base_message} with no arguments"
        print(message)

        receipt = method(*args, sender=signer, required_confirmations=confirmations)
        return _to_receipt(receipt)

    def chain_id(self) -> int:
        return networks.provider.network.chain_id

    def describe(self, signer: AccountAPI) -> List[str]:
        return [
            f"Account: {signer.address}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {self.chain_id()}",
            f"Gas Price: {networks.provider.gas_price}",
        ]
