"""Internal helpers shared by the combinator modules."""
