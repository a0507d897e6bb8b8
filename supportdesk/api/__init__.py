"""HTTP surface for the support desk services."""
