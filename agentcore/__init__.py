"""Usage accounting, name normalisation and response item conversion for LLM agents."""

__version__ = "0.1.0"

__all__ = [
    "computer_params",
    "message_params",
    "output_items",
    "transforms",
    "usage",
]