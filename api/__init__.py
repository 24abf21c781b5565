"""HTTP surface for the Laser Arena."""
