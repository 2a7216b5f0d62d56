"""Create and manage datasheds: data directories described by a TOML config."""

__version__ = "0.1.0"
__all__ = ["config", "init", "cli"]