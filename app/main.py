import logging
from fastapi import FastAPI
from app.api.router import api_router
from app.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Parser diagnostics are DEBUG records; surface them only when asked to
if settings.SQUARE_CATALOG_DEBUG:
    logging.getLogger("app.catalog").setLevel(logging.DEBUG)

app = FastAPI(title="Café Menu Service")

app.include_router(api_router)

@app.get("/")
def root():
    return {"status": "running", "message": "Café Menu Service"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
