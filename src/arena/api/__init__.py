"""HTTP surface for Arena."""
