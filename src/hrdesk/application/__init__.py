"""Application layer: input validation and operation handlers."""
