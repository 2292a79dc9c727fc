import logging

from pointercurve.protocols.base_driver_adapter import BaseDriverAdapter

log = logging.getLogger(__name__)


class DebugDriverAdapter(BaseDriverAdapter):
    """Dummy driver adapter that only logs and remembers what it was given."""

    def __init__(self):
        self.last_curve = None
        self.last_system_curves = None
        self.last_cpi_multiplier = None
        log.info("Debug driver adapter initialized.")

    def apply_curve(self, params, cpi_multiplier):
        log.debug(f"Debug: apply_curve({params}, cpi_multiplier={cpi_multiplier:.4f})")
        self.last_curve = params
        self.last_system_curves = None
        self.last_cpi_multiplier = cpi_multiplier

    def apply_system_curves(self, curves, cpi_multiplier):
        log.debug(f"Debug: apply_system_curves({len(curves)} curves, cpi_multiplier={cpi_multiplier:.4f})")
        self.last_curve = None
        self.last_system_curves = tuple(curves)
        self.last_cpi_multiplier = cpi_multiplier
