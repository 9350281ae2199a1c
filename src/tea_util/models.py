"""
Data models shared by generated SDK clients.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RuntimeOptions(BaseModel):
    """
    Per-request runtime options for a generated SDK client.

    Every field is optional; an unset field means "use the client default".
    Field names are snake_case in Python and camelCase on the wire.

    Attributes:
        autoretry: Retry failed requests automatically
        ignore_ssl: Skip TLS certificate verification (wire name ``ignoreSSL``)
        max_attempts: Maximum number of attempts when retrying
        backoff_policy: Name of the backoff policy ("no", "fixed", ...)
        backoff_period: Backoff period in milliseconds
        read_timeout: Read timeout in milliseconds
        connect_timeout: Connect timeout in milliseconds
        local_addr: Local address to bind outgoing connections to
        http_proxy: Proxy URL for plain HTTP requests
        https_proxy: Proxy URL for HTTPS requests
        no_proxy: Comma separated hosts that bypass the proxy
        max_idle_conns: Maximum idle connections kept in the pool
        socks5_proxy: SOCKS5 proxy address
        socks5_net_work: Network type used for the SOCKS5 proxy

    Example:
        >>> options = RuntimeOptions().set_autoretry(True).set_max_attempts(3)
        >>> options.to_map()
        {'autoretry': True, 'maxAttempts': 3}
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    autoretry: Optional[bool] = None
    ignore_ssl: Optional[bool] = Field(default=None, alias="ignoreSSL")
    max_attempts: Optional[int] = Field(default=None, ge=0)
    backoff_policy: Optional[str] = None
    backoff_period: Optional[int] = Field(default=None, ge=0)
    read_timeout: Optional[int] = Field(default=None, ge=0)
    connect_timeout: Optional[int] = Field(default=None, ge=0)
    local_addr: Optional[str] = None
    http_proxy: Optional[str] = None
    https_proxy: Optional[str] = None
    no_proxy: Optional[str] = None
    max_idle_conns: Optional[int] = Field(default=None, ge=0)
    socks5_proxy: Optional[str] = None
    socks5_net_work: Optional[str] = None

    def __str__(self) -> str:
        return self.model_dump_json(by_alias=True, indent=3)

    def to_map(self) -> Dict[str, Any]:
        """Return the set fields keyed by their wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_map(cls, data: Optional[Dict[str, Any]]) -> "RuntimeOptions":
        """Build options from a camelCase map; unknown keys are ignored."""
        return cls.model_validate(data or {})

    def set_autoretry(self, value: bool) -> "RuntimeOptions":
        self.autoretry = value
        return self

    def set_ignore_ssl(self, value: bool) -> "RuntimeOptions":
        self.ignore_ssl = value
        return self

    def set_max_attempts(self, value: int) -> "RuntimeOptions":
        self.max_attempts = value
        return self

    def set_backoff_policy(self, value: str) -> "RuntimeOptions":
        self.backoff_policy = value
        return self

    def set_backoff_period(self, value: int) -> "RuntimeOptions":
        self.backoff_period = value
        return self

    def set_read_timeout(self, value: int) -> "RuntimeOptions":
        self.read_timeout = value
        return self

    def set_connect_timeout(self, value: int) -> "RuntimeOptions":
        self.connect_timeout = value
        return self

    def set_local_addr(self, value: str) -> "RuntimeOptions":
        self.local_addr = value
        return self

    def set_http_proxy(self, value: str) -> "RuntimeOptions":
        self.http_proxy = value
        return self

    def set_https_proxy(self, value: str) -> "RuntimeOptions":
        self.https_proxy = value
        return self

    def set_no_proxy(self, value: str) -> "RuntimeOptions":
        self.no_proxy = value
        return self

    def set_max_idle_conns(self, value: int) -> "RuntimeOptions":
        self.max_idle_conns = value
        return self

    def set_socks5_proxy(self, value: str) -> "RuntimeOptions":
        self.socks5_proxy = value
        return self

    def set_socks5_net_work(self, value: str) -> "RuntimeOptions":
        self.socks5_net_work = value
        return self
