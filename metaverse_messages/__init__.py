"""Message codecs, packet headers and XML-RPC simulator login for the OpenSimulator protocol."""

__version__ = "0.1.0"