"""Application layer – cache plumbing and the region lookup use case."""
