"""ChessAI: chess position model and pseudo-legal successor generator."""

__version__ = "0.1.0"
