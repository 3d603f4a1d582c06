"""Colletro: personal collection tracking service (collections, community sharing, achievements)."""
