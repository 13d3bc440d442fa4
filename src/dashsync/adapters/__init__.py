"""Adapters connecting the reconciliation core to the outside world."""
