"""Food ordering backend: catalog, user accounts and per-user carts."""
