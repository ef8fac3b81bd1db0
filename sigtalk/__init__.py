"""Text messaging between processes over SIGUSR1/SIGUSR2, one bit per signal."""

__version__ = "0.1.0"
__all__ = ["printf", "protocol", "client", "server", "probe"]