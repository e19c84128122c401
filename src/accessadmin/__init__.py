"""accessadmin - access-control entry administration."""

__version__ = "0.1.0"
