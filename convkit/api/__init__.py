"""API module -- FastAPI application and routers."""
