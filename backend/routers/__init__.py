# Routers package
from .properties import router as properties_router
from .amenities import router as amenities_router
