"""Bloglist API package."""
