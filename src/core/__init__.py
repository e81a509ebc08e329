"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Settings and internal constants

The core module has NO dependencies on other application layers.
"""
