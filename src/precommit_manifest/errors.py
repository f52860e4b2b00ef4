"""Error that is raised when a check fails or a file has been modified."""


class PrecommitError(RuntimeError):
    """Error to be raised by a check or fixer.

    The message is shown to the developer and should describe what is wrong with
    the pre-commit manifest or what has been changed in it.
    """
