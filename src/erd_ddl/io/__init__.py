"""Input adapters: project documents to schema snapshots."""
