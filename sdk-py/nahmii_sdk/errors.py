"""
Exceptions raised by the nahmii SDK
"""


class NahmiiError(Exception):
    """Base class for all SDK errors."""


class ResolutionError(NahmiiError):
    """A contract deployment could not be resolved."""


class UnknownNetworkError(ResolutionError):
    """The network is not one of the supported chain families."""


class ContractNotFoundError(ResolutionError):
    """No deployment is bundled for the contract on the network."""


class MalformedDeploymentError(ResolutionError):
    """A bundled deployment descriptor is unreadable or incomplete."""
