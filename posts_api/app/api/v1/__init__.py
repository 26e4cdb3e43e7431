"""Version 1 of the Posts API."""
