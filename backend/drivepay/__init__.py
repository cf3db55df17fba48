"""DrivePay backend: driver compensation tracking for a small fleet."""

__version__ = "1.0.0"
