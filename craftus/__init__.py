"""Block world simulation core: blocks, chunks, player physics, input and GUI logic."""

__version__ = "0.5.4"