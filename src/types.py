import enum
from dataclasses import asdict, dataclass


class TlsMode(enum.Enum):
    cert = 'cert'
    no_cert = 'no-cert'


@dataclass(frozen=True)
class HostStatus:
    name: str
    is_primary: bool
    timeline_id: int
    replica_attached: bool

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ProbeConfig:
    """
    Connection settings shared by every host probe. Never mutated.
    """

    user: str
    password: str
    tls_mode: TlsMode
    root_cert: str | None = None
    client_cert: str | None = None
    client_key: str | None = None
    port: int = 5432
    dbname: str = 'postgres'
    connect_timeout: float = 10
    query_timeout: float = 10
