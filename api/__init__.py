"""HTTP API over the seller order core."""
