"""
Core utilities shared across the foodcart API.

This package hosts configuration, logging setup, the error taxonomy, password
hashing and the JSON response envelope. Routers and services depend on these
primitives instead of reading os.environ or building responses by hand.
"""
