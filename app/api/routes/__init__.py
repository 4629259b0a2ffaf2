"""Per-resource API routers."""
