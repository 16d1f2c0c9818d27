class MemKVError(Exception):
    """Base class for errors that stop the server from starting."""


class InvalidBindAddress(MemKVError, ValueError):
    def __init__(self, bind, reason):
        super().__init__(f"invalid bind address {bind!r}: {reason}")
        self.bind = bind


class BindError(MemKVError):
    def __init__(self, host, port, cause):
        super().__init__(f"cannot bind {host}:{port}: {cause}")
        self.host = host
        self.port = port
