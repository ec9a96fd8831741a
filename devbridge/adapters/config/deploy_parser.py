"""
Deploy configuration parser
"""
from typing import Dict, Any, List

from ...core.constants import DEFAULT_OVERWRITE
from ...core.exceptions import ConfigError
from ...domain.deploy import DeploymentRequest
from ..transport import TransportSettings, TRANSPORT_KINDS


def parse_transport_config(cfg: Dict[str, Any]) -> TransportSettings:
    """Parse the [transport] table"""
    section = cfg.get("transport", {})
    if not isinstance(section, dict):
        raise ConfigError("[transport] must be a table")

    settings = TransportSettings()
    for key, value in section.items():
        if not hasattr(settings, key):
            raise ConfigError(f"Unknown transport option: {key}")
        setattr(settings, key, value)

    if settings.kind not in TRANSPORT_KINDS:
        raise ConfigError(
            f"Unknown transport '{settings.kind}', expected one of: {', '.join(TRANSPORT_KINDS)}"
        )
    try:
        settings.port = int(settings.port)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid transport port: {settings.port!r}") from e

    return settings


def parse_push_configs(cfg: Dict[str, Any]) -> List[DeploymentRequest]:
    """Parse [[push]] items, in file order"""
    if "push" not in cfg:
        return []

    items = cfg["push"]
    if isinstance(items, dict):
        items = [items]

    requests = []
    for index, item in enumerate(items):
        missing = [key for key in ("src", "dest") if key not in item]
        if missing:
            raise ConfigError(f"push entry {index} is missing: {', '.join(missing)}")

        requests.append(
            DeploymentRequest(
                local_glob=item["src"],
                remote_directory=item["dest"],
                overwrite=bool(item.get("overwrite", DEFAULT_OVERWRITE)),
                chmod=item.get("chmod"),
            )
        )
    return requests
