"""Log a user out."""


class LogoutCommand:
    """Stateless logout.

    Tokens are not tracked server-side, so there is nothing to revoke;
    clients discard their tokens.
    """

    MESSAGE = "Successfully logged out"

    async def execute(self) -> str:
        return self.MESSAGE
