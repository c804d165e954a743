"""
Utilities Package
Deployment configuration and logging setup
"""

from .settings import DeploymentConfig
from .logging_setup import configure_logging

__all__ = ['DeploymentConfig', 'configure_logging']
