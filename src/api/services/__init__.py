# This file marks the services package for record query modules.
# It exists so routers can depend on cohesive service classes instead of raw MongoDB queries.
# Service modules isolate query logic from transport concerns.
