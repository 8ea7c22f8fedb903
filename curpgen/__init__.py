"""Generate CURP keys from personal data; see the ``curp`` module."""

__version__ = "0.1.1"
__all__ = ["curp"]