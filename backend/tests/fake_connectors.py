"""Fake connectors — satisfy the Connector protocol without network IO.

Each fake records its calls into a shared ``log`` list so tests can assert
ordering across connectors.
"""


class FakeConnector:
    def __init__(self, name: str, log: list, error: Exception | None = None):
        self.name = name
        self.log = log
        self.error = error
        self.connected = False
        self.closed = False

    async def connect(self) -> None:
        self.log.append(f"{self.name}.connect")
        if self.error is not None:
            raise self.error
        self.connected = True

    async def close(self) -> None:
        self.log.append(f"{self.name}.close")
        self.closed = True
