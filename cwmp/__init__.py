"""TR-069 (CWMP) message types with XML generation and parse handlers."""

__version__ = "0.1.0"

__all__ = [
    "getparameters",
    "headers",
    "methods",
    "ops",
    "setparameters",
    "structs",
    "transfers",
    "xmlutil",
]