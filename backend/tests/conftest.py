"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a real location-services key
os.environ.pop("GOOGLE_MAPS_API_KEY", None)
