"""Read-mostly HTTP layer over stored traces."""
