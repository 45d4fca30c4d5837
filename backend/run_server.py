"""Run the API with uvicorn, bound to HOST / PORT from the environment."""
import uvicorn

from pharmacy_inventory.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "pharmacy_inventory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
