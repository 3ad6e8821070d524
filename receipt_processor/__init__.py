"""Receipt Processor: receipt intake, validation and points scoring."""

__version__ = "0.1.0"
