"""PyQt6 successor browser."""
