"""Collect local/public addresses and the interface list."""

from __future__ import annotations

import socket
from typing import Callable

import psutil
import requests

from ...models.schema import Interface, NetworkInfo
from ..base import BaseCollector
from . import environment

PUBLIC_IP_URL = "https://ifconfig.me/ip"
PUBLIC_IP_TIMEOUT = 2.0
PROBE_ADDRESS = ("8.8.8.8", 53)

_MAX_PUBLIC_IP_LEN = 50


class NetworkCollector(BaseCollector[NetworkInfo]):
    name = "common.network"

    def __init__(
        self,
        list_interfaces: Callable[[], list[Interface]],
        public_ip_url: str = PUBLIC_IP_URL,
        public_ip_timeout: float = PUBLIC_IP_TIMEOUT,
        probe_address: tuple[str, int] = PROBE_ADDRESS,
    ) -> None:
        """
        Args:
            list_interfaces: Platform-specific interface enumerator.
            public_ip_url: Service that answers with the caller's address as plain text.
            public_ip_timeout: Seconds to wait for that service.
            probe_address: Destination used to make the kernel pick a local route.
        """
        super().__init__()
        self._list_interfaces = list_interfaces
        self.public_ip_url = public_ip_url
        self.public_ip_timeout = public_ip_timeout
        self.probe_address = probe_address

    def _collect(self) -> NetworkInfo:
        return NetworkInfo(
            hostname=self._field("hostname", environment.get_hostname, "unknown"),
            local_ip=self._field("local_ip", self._get_local_ip, "Unknown"),
            public_ip=self._field("public_ip", self._get_public_ip, "N/A"),
            interfaces=tuple(self._field("interfaces", self._get_interfaces, [])),
        )

    # ── Local address ─────────────────────────────────────────────────────────

    def _get_local_ip(self) -> str:
        # connect() on a UDP socket sends nothing; it only selects a route.
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(self.probe_address)
            return sock.getsockname()[0]

    # ── Public address ────────────────────────────────────────────────────────

    def _get_public_ip(self) -> str | None:
        resp = requests.get(self.public_ip_url, timeout=self.public_ip_timeout)
        resp.raise_for_status()
        return validate_public_ip(resp.text)

    # ── Interfaces ────────────────────────────────────────────────────────────

    def _get_interfaces(self) -> list[Interface]:
        interfaces = self._list_interfaces()
        try:
            stats = psutil.net_if_stats()
        except OSError as exc:
            self.errors.append(f"{self.name}.interface_stats: {exc}")
            return interfaces
        return [
            iface.model_copy(update={"is_up": stats[iface.name].isup})
            if iface.name in stats else iface
            for iface in interfaces
        ]


def validate_public_ip(body: str) -> str | None:
    """Accept a short response made only of digits and dots."""
    if not body or len(body) >= _MAX_PUBLIC_IP_LEN:
        return None
    text = body.strip(" \n\t\r")
    if not text or any(ch not in "0123456789." for ch in text):
        return None
    return text
