"""Playback actions and controller."""
