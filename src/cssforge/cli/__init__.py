"""cssforge command line."""
