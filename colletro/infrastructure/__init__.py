"""Infrastructure: persistence, caches, external collaborators, security."""
