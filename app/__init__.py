"""Records search service: federated search over project records."""
