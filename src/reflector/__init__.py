"""Cluster Reflector.

Discover managed Kubernetes clusters owned by a cloud account and produce a
ready-to-use kubeconfig for each of them.
"""

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "Apache-2.0"
