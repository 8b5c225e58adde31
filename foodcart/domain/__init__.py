"""Pure domain rules (catalog contents, cart quantity rules)."""
