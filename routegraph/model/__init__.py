"""Value objects returned by routegraph queries."""
