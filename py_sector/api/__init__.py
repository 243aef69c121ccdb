"""HTTP surface for sector generation."""
