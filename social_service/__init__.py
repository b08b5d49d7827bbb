"""Django project package for the social service."""
