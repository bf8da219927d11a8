"""Routers of the artex web application."""
