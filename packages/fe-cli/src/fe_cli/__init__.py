"""fe-cli: Command-line driver for the Fe compiler."""

from __future__ import annotations

__version__ = "0.1.0"
