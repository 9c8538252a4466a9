"""
shop_orders.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only logging lives here; no metrics or tracing exporters are wired up.
