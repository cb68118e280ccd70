"""Business logic over the JSON data files and the session table."""
