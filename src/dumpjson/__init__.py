"""Convert a scripting host's tagged dumps to JSON text and back."""

from __future__ import annotations

__version__ = "0.3.0"
