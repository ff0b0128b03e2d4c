"""Storefront catalog engine.

Variant pricing, category filtering and add-to-cart composition for a
product catalog fetched from a remote source.
"""

__version__ = "0.1.0"
