
class ConvertError(Exception):
    message: str
    cause: object

    def __init__(self, message: str, cause: object = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.message
        return f'{self.message}: {self.cause}'

class ArgumentError(ConvertError):
    pass

class PathError(ConvertError):
    pass

class DecodeError(ConvertError):
    pass

class EncodeError(ConvertError):
    pass
