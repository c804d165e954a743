"""
Deployment Errors
Terminal failures raised by each deployment step
"""


class DeploymentError(Exception):
    """Base class for every deployment failure"""


class LoadError(DeploymentError):
    """Artifact file missing, unreadable or malformed"""


class ConfigError(DeploymentError):
    """Signing secret missing or malformed"""


class NodeConnectionError(DeploymentError):
    """RPC endpoint unreachable"""


class SubmissionError(DeploymentError):
    """Node rejected the deployment transaction"""


class ConfirmationError(DeploymentError):
    """Transaction was not confirmed (timeout or revert)"""
