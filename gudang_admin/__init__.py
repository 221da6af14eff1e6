"""Administrative web frontend for the gudang (warehouse) backend."""

__version__ = "0.1.0"
