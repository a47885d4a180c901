"""Pydantic data contracts shared by the projection functions."""
