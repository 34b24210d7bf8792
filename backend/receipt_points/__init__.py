"""Top-level application package for the receipt points API.

This package contains everything required to run the FastAPI service
that scores submitted receipts. It includes the Pydantic receipt
schemas, the validation and scoring services, the in-memory points
store and the API routers.

To run the API locally you can execute:

```bash
uvicorn receipt_points.api.main:app --reload --port 8080
```

or use the ``receipt-points`` console script installed with the
package. Configuration values can be overridden with environment
variables or a ``.env`` file at the project root.
"""

__all__: list[str] = []
