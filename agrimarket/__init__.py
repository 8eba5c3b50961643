"""Seller order lifecycle core for the agri marketplace."""

__version__ = "0.1.0"
