"""Read and format information about the local system: CPU, memory, disks, batteries, packages and more."""

__version__ = "0.1.0"