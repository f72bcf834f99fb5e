"""Application layer: session services and account jobs."""
