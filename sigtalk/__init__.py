"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2, with the string, buffer and formatting helpers the tools use."""

__version__ = "0.1.0"