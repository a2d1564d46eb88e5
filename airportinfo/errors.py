class InvalidCodeError(ValueError):
    """Raised before any request is made when a code, code type or authority is rejected."""


class AirportApiHttpError(Exception):
    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error: {status_code} {reason}")


class ConfigError(ValueError):
    pass
