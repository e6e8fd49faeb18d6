"""Storefront: catalog, basket and order checkout."""
