from pathlib import Path
from typing import Dict, NamedTuple, Optional

from ape.utils import ZERO_ADDRESS
from eth_utils import to_checksum_address

from forwarder_deployment.constants import (
    DEFAULT_NETWORK_CHOICE,
    DEPLOY_CONFIRMATIONS,
    NEW_OWNER,
    REGISTER_CONFIRMATIONS,
    TRANSFER_CONFIRMATIONS,
)
from forwarder_deployment.utils import _load_yaml


class DeploymentConfigError(ValueError):
    pass


class Confirmations(NamedTuple):
    """Confirmation depth awaited after each transaction."""

    deploy: int = DEPLOY_CONFIRMATIONS
    register: int = REGISTER_CONFIRMATIONS
    transfer: int = TRANSFER_CONFIRMATIONS


class DeploymentConfig(NamedTuple):
    """
    Explicit settings for a single forwarder deployment.

    ``rpc_endpoint`` is an ape network choice (``ecosystem:network:provider``)
    or a provider URI; the connected network must match it.
    """

    rpc_endpoint: str = DEFAULT_NETWORK_CHOICE
    signer_index: int = 0
    confirmations: Confirmations = Confirmations()
    transfer_ownership: bool = False
    new_owner: str = NEW_OWNER
    chain_id: Optional[int] = None

    @classmethod
    def from_dict(cls, config: Dict) -> "DeploymentConfig":
        """Builds a config from a params dictionary, defaulting every missing value."""
        if not isinstance(config, dict):
            raise DeploymentConfigError("Malformed deployment params.")

        deployment = config.get("deployment") or dict()
        confirmations = config.get("confirmations") or dict()
        ownership = config.get("ownership") or dict()

        unknown = set(confirmations) - set(Confirmations._fields)
        if unknown:
            raise DeploymentConfigError(
                f"Unknown confirmation step(s): {', '.join(sorted(unknown))}"
            )

        result = cls(
            rpc_endpoint=deployment.get("rpc_endpoint", DEFAULT_NETWORK_CHOICE),
            signer_index=deployment.get("signer_index", 0),
            confirmations=Confirmations(**confirmations),
            transfer_ownership=ownership.get("transfer", False),
            new_owner=ownership.get("new_owner", NEW_OWNER),
            chain_id=_get_chain_id(deployment),
        )
        return result.validate()

    @classmethod
    def from_yaml(cls, filepath: Path) -> "DeploymentConfig":
        """Loads the deployment config from a YAML params file."""
        print(f"Loading deployment params from {filepath}...")
        return cls.from_dict(_load_yaml(filepath))

    def validate(self) -> "DeploymentConfig":
        """Checks every value and returns a config with a checksummed new owner."""
        if not isinstance(self.rpc_endpoint, str) or not self.rpc_endpoint:
            raise DeploymentConfigError(f"Invalid rpc_endpoint {self.rpc_endpoint!r}.")

        if not isinstance(self.signer_index, int) or self.signer_index < 0:
            raise DeploymentConfigError(
                f"signer_index must be a non-negative integer, got {self.signer_index!r}."
            )

        for step, depth in zip(self.confirmations._fields, self.confirmations):
            if not isinstance(depth, int) or depth < 0:
                raise DeploymentConfigError(
                    f"'{step}' confirmations must be a non-negative integer, got {depth!r}."
                )

        # a YAML string such as "false" is truthy
        if not isinstance(self.transfer_ownership, bool):
            raise DeploymentConfigError(
                f"transfer must be true or false, got {self.transfer_ownership!r}."
            )

        try:
            new_owner = to_checksum_address(self.new_owner)
        except (TypeError, ValueError):
            raise DeploymentConfigError(f"Invalid new owner address '{self.new_owner}'.")
        if new_owner == ZERO_ADDRESS:
            raise DeploymentConfigError("Ownership cannot be transferred to the zero address.")

        return self._replace(new_owner=new_owner)

    def check_network(self, network_choice: str) -> None:
        """Checks that the connected network is the one this config was written for."""
        if network_choice != self.rpc_endpoint:
            raise DeploymentConfigError(
                f"rpc_endpoint in params file ({self.rpc_endpoint}) does not match "
                f"the connected network ({network_choice})."
            )


def _get_chain_id(deployment: Dict) -> Optional[int]:
    chain_id = deployment.get("chain_id")
    if chain_id is None:
        return None
    try:
        return int(chain_id)
    except (TypeError, ValueError):
        raise DeploymentConfigError(f"chain_id must be an integer, got {chain_id!r}.")
