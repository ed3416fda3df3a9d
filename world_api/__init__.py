# world_api
# HTTP service for the world dataset (cities and countries)

__version__ = "0.1.0"
