"""Output formats for converted documents."""
