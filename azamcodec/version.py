"""Version resolution for package metadata and runtime engine version."""

from .main import azamcodec

__version__ = azamcodec.ENGINE_VERSION


__all__ = ["__version__"]
