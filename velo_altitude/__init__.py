"""Velo-Altitude category browsing service."""
