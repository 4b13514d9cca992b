"""Incremental grid pathfinding under fog of war."""
