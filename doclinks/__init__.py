"""doclinks - external link checker for documentation trees."""
