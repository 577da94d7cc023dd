"""Application layer - the departure classification and suggestion engine."""
