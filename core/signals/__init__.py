"""Django signals for social graph events."""

from core.signals.bond_signals import log_bond_saved

__all__ = ["log_bond_saved"]
