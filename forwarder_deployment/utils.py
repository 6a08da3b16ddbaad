from pathlib import Path
from typing import Optional

import yaml


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def validate_chain_id(config_chain_id: Optional[int], network_chain_id: int, live: bool) -> None:
    """
    Checks that the chain_id pinned in the params file matches the connected network.
    Local networks are never checked.
    """
    if config_chain_id is None or not live:
        return
    if int(config_chain_id) != network_chain_id:
        raise ValueError(
            f"chain_id in params file ({config_chain_id}) does not match "
            f"chain_id of current network ({network_chain_id})."
        )
