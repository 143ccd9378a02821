"""
Health checks for liveness and readiness probes.
"""
from datetime import datetime, timezone
from typing import Dict, Any

from . import __version__
from .logging import SERVICE_NAME
from .services.recorder import RequestRecorder


class HealthChecker:
    """
    Liveness: is the process up? Readiness: can the store take writes?
    """

    def __init__(self, service_name: str = SERVICE_NAME, version: str = __version__):
        self.service_name = service_name
        self.version = version

    def _base(self) -> Dict[str, Any]:
        return {
            "service": self.service_name,
            "version": self.version,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }

    def liveness(self) -> Dict[str, Any]:
        return {"status": "ok", **self._base()}

    def readiness(self, recorder: RequestRecorder) -> Dict[str, Any]:
        """
        Readiness check against the recorder's store.

        Returns:
            dict: status "ready" or "not_ready" with the store check result
        """
        healthy = recorder.health_check()
        store_check = {
            "status": "ok" if healthy else "error",
            "backend": recorder.store.name,
        }
        return {
            "status": "ready" if healthy else "not_ready",
            "checks": {"store": store_check},
            **self._base(),
        }
