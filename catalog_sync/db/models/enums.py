from enum import Enum

class Platform(str, Enum):
    """Supported e-commerce platforms"""
    VTEX = "vtex"
    SHOPIFY = "shopify"
