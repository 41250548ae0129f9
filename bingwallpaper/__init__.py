"""Download Bing daily wallpapers and their metadata: client, storage, downloader and command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]