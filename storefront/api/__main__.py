import uvicorn

from storefront.api import api_logger as logger
from storefront.api.app import app
from storefront.config import API_HOST, API_PORT

if __name__ == "__main__":
    logger.info(f"Starting Storefront API on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
