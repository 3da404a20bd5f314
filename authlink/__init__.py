"""authlink: email verification and login tokens service."""

__version__ = "0.1.0"
