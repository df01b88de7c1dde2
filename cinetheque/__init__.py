"""Cinetheque: a movie catalogue HTTP service."""
