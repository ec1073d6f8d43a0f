"""
Error types
===========

Every failure the ledger reports is a `LedgerError`. They subclass
`ValueError` so the CLI can catch them the same way it catches bad
command arguments.

- ConfigurationError: base CPI missing, bad bounds (fatal at startup)
- DataUnavailable:   no CPI value published for a month
- InvalidMonth:      month key malformed, unpublished or out of bounds
- InvalidAmount:     amount / asking price not usable
"""


class LedgerError(ValueError):
    pass


class ConfigurationError(LedgerError):
    pass


class DataUnavailable(LedgerError):
    def __init__(self, month: str):
        super().__init__(f"CPI data missing for {month}")
        self.month = month


class InvalidMonth(LedgerError):
    pass


class InvalidAmount(LedgerError):
    pass
