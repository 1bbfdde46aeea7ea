"""Ports (abstract interfaces) implemented by the infrastructure layer."""

from ecbrates.domain.ports.http import HttpFetcher

__all__ = ["HttpFetcher"]
