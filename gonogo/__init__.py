"""Go/No-Go calculator for retailer x developer partnerships."""

__version__ = "0.1.0"
