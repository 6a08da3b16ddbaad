import click
from ape.utils import ZERO_ADDRESS
from eth_utils import to_checksum_address


class OwnerAddress(click.ParamType):
    """A checksummed, non-zero address that can receive forwarder ownership."""

    name = "owner_address"

    def convert(self, value, param, ctx):
        try:
            address = to_checksum_address(value)
        except (TypeError, ValueError):
            self.fail(f"{value} is not a valid ethereum address", param, ctx)
        if address == ZERO_ADDRESS:
            self.fail("ownership cannot be transferred to the zero address", param, ctx)
        return address
