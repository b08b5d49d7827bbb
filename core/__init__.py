"""Core application: users, bonds, places and posts."""
