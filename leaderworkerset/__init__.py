"""Data model, configuration defaults and apply configurations for LeaderWorkerSet workloads."""

__version__ = "0.1.0"

__all__ = ["api", "applyconfig", "applyset", "config", "scheme"]