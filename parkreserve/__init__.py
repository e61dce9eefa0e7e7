"""Parking reservation service."""
