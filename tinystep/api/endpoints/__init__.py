"""Endpoint definitions: one module per endpoint, each exposing SPEC and Adapter."""

from . import health, hosted, provisioners, root, version

__all__ = ["health", "hosted", "provisioners", "root", "version"]
