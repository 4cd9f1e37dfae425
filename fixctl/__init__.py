"""Interactive repair console for Windows workstations."""
