"""PyQt6 presentation layer: board scene, view and main window."""
