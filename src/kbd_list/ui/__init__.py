"""User interface hosts for list navigation."""
