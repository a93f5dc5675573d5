"""Backend service kinds and their address/credential resolution table."""

import enum
from dataclasses import dataclass
from typing import Dict


class ChiaService(str, enum.Enum):
    """Backend services the status indicator talks to."""

    FULL_NODE = "full_node"
    FARMER = "farmer"
    HARVESTER = "harvester"


@dataclass(frozen=True)
class ServiceSpec:
    """How to resolve one service: default URL, env override, cert file stem."""

    default_url: str
    env_var: str
    cert_name: str

    def cert_file(self) -> str:
        return f"{self.cert_name}/private_{self.cert_name}.crt"

    def key_file(self) -> str:
        return f"{self.cert_name}/private_{self.cert_name}.key"


# New services are added here only; the call contract does not change.
SERVICE_TABLE: Dict[ChiaService, ServiceSpec] = {
    ChiaService.FULL_NODE: ServiceSpec("https://localhost:8555", "CHIA_FULL_NODE_URL", "full_node"),
    ChiaService.FARMER: ServiceSpec("https://localhost:8559", "CHIA_FARMER_URL", "farmer"),
    ChiaService.HARVESTER: ServiceSpec("https://localhost:8560", "CHIA_HARVESTER_URL", "harvester"),
}
