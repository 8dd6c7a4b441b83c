import secrets
import uuid

from ..core.ports import IdGenerator


class UuidId(IdGenerator):
    def new_id(self) -> str:
        return str(uuid.uuid4())


class HexId(IdGenerator):
    def __init__(self, nbytes: int = 6):  # 6 bytes -> 12 hex chars
        if isinstance(nbytes, bool) or not isinstance(nbytes, int) or nbytes <= 0:
            raise ValueError(f"HexId needs a positive byte count, got {nbytes!r}")
        self.nbytes = nbytes

    def new_id(self) -> str:
        return secrets.token_hex(self.nbytes)


def make_id_generator(strategy: str = "uuid", nbytes: int = 6) -> IdGenerator:
    """Build an id generator by strategy name ("uuid" or "hex")."""
    if strategy == "uuid":
        return UuidId()
    if strategy == "hex":
        return HexId(nbytes=nbytes)
    raise ValueError(f"Unknown ID strategy: {strategy}")
