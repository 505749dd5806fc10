from permission_templates.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
