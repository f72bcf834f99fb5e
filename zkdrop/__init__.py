"""Zero-knowledge transfer API client."""
