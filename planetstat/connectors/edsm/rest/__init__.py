"""EDSM REST connector."""

from .provider import EDSMRESTConnector

__all__ = ["EDSMRESTConnector"]
