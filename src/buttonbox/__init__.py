"""
ButtonBox Dashboard - Variable & Configuration Registry

Core of the companion dashboard for the BLE button box: the telemetry
variable catalog, the dashboard configuration model and its persistent
store.
"""

__version__ = "1.0.0"
