"""EDSM connector implementation."""

from .rest.provider import EDSMRESTConnector

__all__ = ["EDSMRESTConnector"]
