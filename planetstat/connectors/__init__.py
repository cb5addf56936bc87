"""Catalog connectors."""

from .edsm import EDSMRESTConnector

__all__ = ["EDSMRESTConnector"]
