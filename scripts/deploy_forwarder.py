#!/usr/bin/python3

import sys
from pathlib import Path

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from forwarder_deployment.config import DeploymentConfig
from forwarder_deployment.confirm import _confirm_deployer, _confirm_transfer, _continue
from forwarder_deployment.constants import DEPLOYER_OWNER
from forwarder_deployment.network import ApeNetwork, is_local_network
from forwarder_deployment.runner import DeploymentFailed, execute, get_signer, report_failure
from forwarder_deployment.types import OwnerAddress
from forwarder_deployment.utils import validate_chain_id


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--config",
    "-c",
    "config_filepath",
    help="Path to a deployment params YAML file.",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--signer-index",
    "-i",
    help="Index of the deployer account.",
    type=click.IntRange(min=0),
    required=False,
)
@click.option(
    "--transfer-ownership/--no-transfer-ownership",
    help="Transfer forwarder ownership after configuration.",
    default=None,
)
@click.option(
    "--new-owner",
    "-o",
    help="Address receiving forwarder ownership.",
    type=OwnerAddress(),
    required=False,
)
@click.option(
    "--autosign",
    help="Sign transactions without prompting.",
    is_flag=True,
    default=False,
)
def cli(
    network,
    config_filepath,
    signer_index,
    transfer_ownership,
    new_owner,
    autosign,
):
    """Deploys and configures the Biconomy forwarder."""
    network_choice = networks.provider.network_choice
    if config_filepath:
        config = DeploymentConfig.from_yaml(config_filepath)
        config.check_network(network_choice)
    else:
        config = DeploymentConfig(rpc_endpoint=network_choice)
    overrides = {
        "signer_index": signer_index,
        "transfer_ownership": transfer_ownership,
        "new_owner": new_owner,
    }
    config = config._replace(**{k: v for k, v in overrides.items() if v is not None}).validate()

    ape_network = ApeNetwork()
    live = not is_local_network()
    validate_chain_id(config.chain_id, network_chain_id=ape_network.chain_id(), live=live)

    try:
        signer = get_signer(ape_network, config.signer_index)
    except DeploymentFailed as error:
        sys.exit(report_failure(error))

    print(
        *ape_network.describe(signer),
        f"Transfer ownership: {config.transfer_ownership}",
        f"New owner: {config.new_owner}",
        sep="\n",
    )

    if live:
        signer.set_autosign(autosign)
    if autosign:
        print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
    else:
        if live:
            _confirm_deployer(signer.address, expected_owner=DEPLOYER_OWNER)
        if config.transfer_ownership:
            _confirm_transfer(config.new_owner)
        _continue()

    sys.exit(execute(config=config, network=ape_network, signer=signer))


if __name__ == "__main__":
    cli()
