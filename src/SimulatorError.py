class SimulatorError(Exception):
    """base class for every failure the simulator reports to its caller"""


class InvalidAddress(SimulatorError, ValueError):

    def __init__(self, line: str, line_number: int = None, path: str = None):
        self.line = line
        self.line_number = line_number
        self.path = path
        where = ''
        if path is not None:
            where += f'{path}:'
        if line_number is not None:
            where += f'{line_number}: '
        super().__init__(f"{where}invalid logical address {line!r} (expected an integer in 0..65535)")


class BackingStoreUnavailable(SimulatorError):

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        self.reason = reason
        message = f"could not open backing store {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ShortRead(SimulatorError):

    def __init__(self, path: str, page_number: int, bytes_read: int, expected: int):
        self.path = path
        self.page_number = page_number
        self.bytes_read = bytes_read
        self.expected = expected
        super().__init__(f"short read from backing store {path}: page {page_number} "
                         f"returned {bytes_read} of {expected} bytes")


class UnknownPolicy(SimulatorError, ValueError):

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown replacement policy {name!r} (expected fifo or lru)")


class EmptyInput(SimulatorError):

    def __init__(self):
        super().__init__("no addresses were translated; fault and hit rates are undefined")
