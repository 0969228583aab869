"""Tools for rustdoc implementor tables."""
