"""Core verification logic: platforms, prefixes, products and manifests."""
