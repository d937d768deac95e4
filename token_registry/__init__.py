"""
NFT Token Registry

A small HTTP service that stores NFT-style token metadata in memory and
hosts the uploaded token images from local disk.
"""

__version__ = "1.0.0"
