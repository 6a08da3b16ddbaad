import sys


def _abort() -> None:
    print("Aborting deployment!")
    sys.exit(-1)


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_deployer(deployer_address: str, expected_owner: str) -> None:
    """Asks the user to confirm a deployer account that is not the expected owner."""
    if deployer_address.lower() == expected_owner.lower():
        return
    answer = input(
        f"Deployer {deployer_address} is not the expected owner {expected_owner}; "
        "Continue? Y/N? "
    )
    if answer.lower().strip() == "n":
        _abort()


def _confirm_transfer(new_owner: str) -> None:
    """Asks the user to confirm the ownership transfer target."""
    answer = input(f"Ownership will be transferred to {new_owner}; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        _abort()
