"""File intake API - identifier decoding and queue submission."""
