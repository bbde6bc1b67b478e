# This file marks the schemas package for API response models.
# Record documents pass through unmodelled; only operational and aggregate responses have schemas.
