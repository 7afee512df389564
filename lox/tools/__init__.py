"""Build-time tools for the Lox front end."""
