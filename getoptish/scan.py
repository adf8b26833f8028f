from typing import Optional


class ArgScan:
    """
    A cursor over an argument vector, shared by the dispatch loop and the
    option resolvers so that either can consume the next token.
    """

    _args: list[str]
    _off: int

    def __init__(self, args: list[str], off: int = 0):
        """
        Initializes a new `ArgScan` object.

        Args:
            args: The tokens to scan. The list is copied.
            off: The starting offset within the tokens.
        """
        self._args = list(args)
        self._off = off

    def eof(self) -> bool:
        """
        Checks if every token has been consumed.

        Returns:
            True if at the end of the tokens, False otherwise.
        """
        return self._off >= len(self._args)

    def curr(self) -> Optional[str]:
        """
        Returns the current token without consuming it.

        Returns:
            The current token, or None if at the end.
        """
        if self.eof():
            return None
        return self._args[self._off]

    def next(self) -> Optional[str]:
        """
        Consumes the current token.

        Returns:
            The consumed token, or None if at the end.
        """
        res = self.curr()
        if res is not None:
            self._off += 1
        return res

    def rest(self) -> list[str]:
        """
        Consumes every remaining token.

        Returns:
            The remaining tokens, in order.
        """
        res = self._args[self._off :]
        self._off = len(self._args)
        return res
