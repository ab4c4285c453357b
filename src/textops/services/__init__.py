"""Service layer: the OpResult contract and the validating operations."""
