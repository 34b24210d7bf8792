"""API package.

This exposes router modules to simplify test imports like:
	from receipt_points.api.routes.receipts import router
"""

__all__ = [
	"routes",
]
