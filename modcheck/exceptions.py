"""Exception hierarchy for modcheck."""


class ModcheckError(Exception):
    """Base exception for modcheck errors."""
    pass


class ConfigurationError(ModcheckError, ValueError):
    """Raised when checks or the analysis configuration are invalid."""
    pass


class ParseError(ModcheckError, ValueError):
    """Raised when a source file cannot be parsed into a tree."""
    pass


class CheckContractError(ModcheckError, RuntimeError):
    """Raised when a check is dispatched a node type it never asked for."""
    pass
