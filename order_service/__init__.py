"""
order_service — Order API

Small FastAPI service that validates and records orders in memory and reports
health for the deployment platform.
"""

__version__ = "1.0.0"
