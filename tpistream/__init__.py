"""Reader for the type (TPI) and id (IPI) streams of PDB debug information files."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "buffer",
    "constants",
    "errors",
    "header",
    "ids",
    "items",
    "primitive",
    "records",
    "typedata",
]