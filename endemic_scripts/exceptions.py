"""Errors raised by the deployment and migration scripts."""


class ScriptError(Exception):
    """Base class for every error the scripts raise on purpose."""


class ConfigurationError(ScriptError):
    pass


class UnknownNetworkError(ConfigurationError):
    def __init__(self, network):
        super().__init__(f"No configuration for network '{network}'")
        self.network = network


class MissingAddressError(ScriptError):
    def __init__(self, network, name):
        super().__init__(f"Address '{name}' is not set for network '{network}'")
        self.network = network
        self.name = name


class InvalidRecordError(ScriptError):
    pass


class ArtifactNotFoundError(ScriptError):
    pass


class TransactionFailedError(ScriptError):
    def __init__(self, label, tx_hash, receipt=None):
        super().__init__(f"Transaction '{label}' reverted: {tx_hash}")
        self.label = label
        self.tx_hash = tx_hash
        self.receipt = receipt


class SubgraphError(ScriptError):
    pass
