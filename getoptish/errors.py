class ParseError(RuntimeError):
    """
    Base class for everything the parser rejects.

    Attributes:
        option: The option as the user typed it (e.g. "-f" or "--col").
    """

    option: str

    def __init__(self, option: str, message: str):
        super().__init__(message)
        self.option = option


class UnknownOption(ParseError):
    similar: list[str]

    def __init__(self, option: str, similar: list[str] = []):
        message = f'Unknown option "{option}"'
        if len(similar) > 0:
            message += f". Most similar options are {', '.join(similar)}"
        super().__init__(option, message)
        self.similar = list(similar)


class AmbiguousOption(ParseError):
    candidates: list[str]

    def __init__(self, option: str, candidates: list[str]):
        super().__init__(
            option,
            f'Option "{option}" is ambiguous. Similar options are: {", ".join(candidates)}',
        )
        self.candidates = list(candidates)


class RequiredOptionArgumentMissing(ParseError):
    def __init__(self, option: str):
        super().__init__(option, f'Required argument for option "{option}" is missing')


class OptionDoesNotAllowArgument(ParseError):
    def __init__(self, option: str):
        super().__init__(option, f'Option "{option}" does not allow an argument')
