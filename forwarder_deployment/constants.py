from pathlib import Path

import forwarder_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(forwarder_deployment.__file__).parent
PARAMS_DIR = DEPLOYMENT_DIR / "params"

#
# Networks
#

LOCAL_NETWORK_NAMES = ["local"]
DEFAULT_NETWORK_CHOICE = "ethereum:local:test"

#
# Contracts
#

FORWARDER_CONTRACT_NAME = "BiconomyForwarder"
FORWARDER_DISPLAY_NAME = "Biconomy Forwarder"

# registerDomainSeparator(name, version)
DOMAIN_SEPARATOR_NAME = "Powered by Biconomy"
DOMAIN_SEPARATOR_VERSION = "1"

#
# Ownership
#

# owner expected to run the deployment
DEPLOYER_OWNER = "0x2b241cBe6B455e08Ade78a7ccC42DE2403d7b566"
# prod config admin
NEW_OWNER = "0xbb3982c15D92a8733e82Db8EBF881D979cFe9017"

#
# Confirmations
#

DEPLOY_CONFIRMATIONS = 2
REGISTER_CONFIRMATIONS = 2
TRANSFER_CONFIRMATIONS = 1

#
# Console
#

SUCCESS_BANNER = "👏 🏁🏁 DEPLOYMENT FINISHED"
FAILURE_BANNER = "❌ DEPLOYMENT FAILED ❌"
