# This file marks the routers package for API route modules.
# The package groups endpoint modules by record kind, plus operational health routes.
