"""List view projection and display helpers."""
