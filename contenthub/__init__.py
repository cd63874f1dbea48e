"""Content hub service: sandboxed HTML/CSS/JS projects and documents."""

__version__ = "0.1.0"
