"""Infrastructure adapters: transport, token storage, security, logging, API client."""
