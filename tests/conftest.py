from types import SimpleNamespace

import pytest

from forwarder_deployment.config import DeploymentConfig
from forwarder_deployment.network import DeployedContract, NetworkConnection, TransactionReceipt

# Common constants
FORWARDER_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
DEPLOY_GAS = 500_000
REGISTER_GAS = 50_000
TRANSFER_GAS = 28_000


class FakeNetwork(NetworkConnection):
    """In-memory NetworkConnection recording every call it receives."""

    def __init__(self, gas=None, errors=None, confirmed=True):
        self.gas = {
            "deploy": DEPLOY_GAS,
            "registerDomainSeparator": REGISTER_GAS,
            "transferOwnership": TRANSFER_GAS,
        }
        self.gas.update(gas or {})
        self.errors = errors or {}
        self.confirmed = confirmed
        self.calls = list()
        self.signers = [SimpleNamespace(address=DEPLOYER_ADDRESS)]

    def _receipt(self, name):
        return TransactionReceipt(
            txn_hash=f"0x{len(self.calls):064x}",
            block_number=len(self.calls),
            gas_used=self.gas[name],
            confirmed=self.confirmed,
        )

    def signer(self, index):
        if "signer" in self.errors:
            raise self.errors["signer"]
        return self.signers[index]

    def deploy(self, contract_name, signer, confirmations):
        self.calls.append(("deploy", contract_name, (), confirmations))
        if "deploy" in self.errors:
            raise self.errors["deploy"]
        return DeployedContract(address=FORWARDER_ADDRESS, receipt=self._receipt("deploy"))

    def transact(self, contract, method_name, *args, signer, confirmations):
        self.calls.append((method_name, contract.address, args, confirmations))
        if method_name in self.errors:
            raise self.errors[method_name]
        return self._receipt(method_name)


# Fixtures
@pytest.fixture
def config():
    return DeploymentConfig().validate()


@pytest.fixture
def network():
    return FakeNetwork()
