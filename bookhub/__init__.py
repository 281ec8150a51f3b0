"""Client-side catalog browser for a book API."""
