"""Operational commands, installed as console scripts."""
