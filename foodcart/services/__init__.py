"""
High-level use cases for the foodcart API.

Each service validates its input, then orchestrates the repository to apply
the business rules (register, login, cart updates, purchase). Routers call
these services instead of touching the storage layer directly.
"""
