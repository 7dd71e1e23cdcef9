"""Timed online test sessions backed by the content REST API."""
