"""playstyle: style conformance checker for YAML automation playbooks."""

__version__ = "0.1.0"
