"""SellerDesk: seller dashboard API for catalog, orders, content and analytics."""

__version__ = "0.1.0"
