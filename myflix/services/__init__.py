"""Business logic for login, accounts and the movie catalog."""
